from django.contrib.auth import get_user_model
from django.test import TestCase, RequestFactory
from django.urls import reverse

from blog.models import Post
from framework import hooks as editor_hooks
from framework.editor import SaveDirective
from framework.nonces import create_nonce, item_action
from framework.screens import Screen, ScreenMode
from framework.utils import admin_url

from publishing import handlers, hooks
from publishing.handlers import (
    publish_on_save, redirect_to_create_new, render_button, render_script, render_style)
from publishing.intent import SubmittedIntent, get_submitted_intent
from publishing.visibility import button_visible_for, default_should_show, should_show_button


class VisibilityTest(TestCase):
    def test_statuses(self):
        for status in ['auto-draft', 'draft']:
            self.assertTrue(button_visible_for(status), status)
        for status in ['pending', 'future', 'publish', 'private', 'trash']:
            self.assertFalse(button_visible_for(status), status)

    def test_screen(self):
        self.assertTrue(default_should_show(Screen(ScreenMode.CREATE_NEW)))
        self.assertFalse(default_should_show(Screen(ScreenMode.EDIT_EXISTING)))
        self.assertFalse(default_should_show(Screen()))

    def test_should_show_filter(self):
        def always(should_show, screen):
            return True

        hooks.should_show_button.register(always)
        self.addCleanup(hooks.should_show_button.unregister, always)
        self.assertTrue(should_show_button(Screen(ScreenMode.OTHER)))


class IntentTest(TestCase):
    def test_parse(self):
        request = RequestFactory().post('/', {
            'publish_and_add_new': 'Publish & Add New',
            'post_ID': '42',
            'post_type': ' <b>note</b> ',
            '_nonce': 'abc'})
        self.assertEqual(
            SubmittedIntent.from_request(request),
            SubmittedIntent(publish_requested=True, item_id=42, item_type='note', token='abc'))

    def test_empty(self):
        request = RequestFactory().post('/', {'publish_and_add_new': '', 'post_ID': 'x'})
        self.assertEqual(SubmittedIntent.from_request(request), SubmittedIntent())
        self.assertEqual(SubmittedIntent.from_request(RequestFactory().get('/')), SubmittedIntent())

    def test_parsed_once(self):
        request = RequestFactory().post('/', {'publish_and_add_new': '1'})
        intent = get_submitted_intent(request)
        self.assertIs(get_submitted_intent(request), intent)


class RelayTestMixin:
    def setUp(self):
        self.factory = RequestFactory()
        self.user = get_user_model().objects.create(username='editor')
        self.directive = SaveDirective(id=5, post_type='article', status='draft', title='Title')

    def make_request(self, item_id=5, **data):
        data.setdefault('_nonce', create_nonce(item_action(item_id), self.user))
        data.setdefault('post_type', 'article')
        request = self.factory.post('/', data)
        request.user = self.user
        return request


class StatusOverrideTest(RelayTestMixin, TestCase):
    def test_publish(self):
        request = self.make_request(publish_and_add_new='1')
        directive = publish_on_save(self.directive, request)
        self.assertEqual(directive, self.directive.with_status('publish'))

        # Running again on the overridden data changes nothing
        self.assertEqual(publish_on_save(directive, request), directive)

    def test_no_intent(self):
        self.assertEqual(publish_on_save(self.directive, self.make_request()), self.directive)

    def test_invalid_nonce(self):
        request = self.make_request(publish_and_add_new='1', _nonce='forged')
        self.assertEqual(publish_on_save(self.directive, request), self.directive)

        request = self.make_request(publish_and_add_new='1', item_id=6)
        self.assertEqual(publish_on_save(self.directive, request), self.directive)

    def test_missing_nonce(self):
        request = self.factory.post('/', {'publish_and_add_new': '1'})
        request.user = self.user
        self.assertEqual(publish_on_save(self.directive, request), self.directive)

    def test_missing_id(self):
        directive = SaveDirective(id=None, post_type='article', status='draft')
        request = self.make_request(publish_and_add_new='1')
        self.assertEqual(publish_on_save(directive, request), directive)


class RedirectOverrideTest(RelayTestMixin, TestCase):
    location = '/admin/blog/post/'

    def test_redirect(self):
        request = self.make_request(publish_and_add_new='1')
        self.assertEqual(redirect_to_create_new(self.location, 5, request), '/admin/create-new?type=article')
        self.assertEqual(redirect_to_create_new(self.location, 5, request), admin_url('create-new?type=article'))

    def test_no_intent(self):
        self.assertEqual(redirect_to_create_new(self.location, 5, self.make_request()), self.location)

    def test_missing_type(self):
        request = self.make_request(publish_and_add_new='1', post_type='')
        self.assertEqual(redirect_to_create_new(self.location, 5, request), self.location)

    def test_type_escaped(self):
        request = self.make_request(publish_and_add_new='1', post_type='my/type  x')
        self.assertEqual(redirect_to_create_new(self.location, 5, request), '/admin/create-new?type=my%2Ftype+x')

    def test_missing_nonce(self):
        request = self.factory.post('/', {'publish_and_add_new': '1', 'post_type': 'article'})
        request.user = self.user
        self.assertEqual(redirect_to_create_new(self.location, 5, request), self.location)

    def test_independent_checks(self):
        # Nonce scoped to post 5 does not authorize a redirect for post 6
        request = self.make_request(publish_and_add_new='1')
        self.assertEqual(publish_on_save(self.directive, request).status, 'publish')
        self.assertEqual(redirect_to_create_new(self.location, 6, request), self.location)


class MarkupTest(TestCase):
    def setUp(self):
        self.request = RequestFactory().get('/')

    def test_button(self):
        content = render_button(Post(status='draft'), self.request)
        self.assertIn('id="publishing-and-add-new-action"', content)
        self.assertIn('name="publish_and_add_new"', content)
        self.assertIn('Publish &amp; Add New', content)

        self.assertIsNone(render_button(Post(status='publish'), self.request))
        self.assertIsNone(render_button(None, self.request))

    def test_label_filter(self):
        def label(value):
            return 'Save & Next'

        hooks.button_label.register(label)
        self.addCleanup(hooks.button_label.unregister, label)
        self.assertIn('Save &amp; Next', render_button(Post(status='auto-draft'), self.request))

    def test_assets(self):
        screen = Screen(ScreenMode.CREATE_NEW, 'post')
        self.assertIn('<style>', render_style(screen))
        self.assertIn('django.jQuery', render_script(screen))
        self.assertIsNone(render_style(Screen(ScreenMode.EDIT_EXISTING, 'post')))
        self.assertIsNone(render_script(Screen(ScreenMode.EDIT_EXISTING, 'post')))

    def test_registered(self):
        self.assertIn(render_button, editor_hooks.render_editor.handlers)
        self.assertIn(render_style, editor_hooks.print_styles.handlers)
        self.assertIn(render_script, editor_hooks.print_footer_scripts.handlers)
        self.assertIn(publish_on_save, editor_hooks.before_save.handlers)
        self.assertIn(redirect_to_create_new, editor_hooks.after_save_redirect.handlers)


class PublishAndAddNewTest(TestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_superuser('admin', 'a.b@c.de', 'password')
        self.client.force_login(self.user)
        self.post = Post.objects.create(pk=42, title='', post_type='note', status='draft', author=self.user)
        self.post_data = {
            'title': 'First note',
            'description': '',
            'text': 'Text',
            'status': 'draft',
            'publish_date': '',
            'author': self.user.pk,
            '_nonce': create_nonce('update-item-42', self.user),
            'post_ID': '42',
            'post_type': 'note',
        }

    def test_publish_and_add_new(self):
        self.post_data['publish_and_add_new'] = 'Publish & Add New'
        response = self.client.post(reverse('admin:blog_post_change', args=[42]), self.post_data)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, '/admin/create-new?type=note')

        self.post.refresh_from_db()
        self.assertEqual(self.post.status, 'publish')
        self.assertIsNotNone(self.post.publish_date)
        self.assertTrue(Post.objects.published().filter(pk=42).exists())

    def test_save(self):
        self.post_data['_save'] = 'Save'
        response = self.client.post(reverse('admin:blog_post_change', args=[42]), self.post_data)
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, reverse('admin:blog_post_changelist'))

        self.post.refresh_from_db()
        self.assertEqual(self.post.status, 'draft')
        self.assertEqual(self.post.title, 'First note')

    def test_forged(self):
        self.post_data['publish_and_add_new'] = 'Publish & Add New'
        self.post_data['_nonce'] = create_nonce('update-item-41', self.user)
        response = self.client.post(reverse('admin:blog_post_change', args=[42]), self.post_data)
        self.assertEqual(response.url, reverse('admin:blog_post_changelist'))
        self.post.refresh_from_db()
        self.assertEqual(self.post.status, 'draft')

    def test_without_extension(self):
        # With the handlers removed, saving falls back to the admin's own flow
        handlers.unregister()
        self.addCleanup(handlers.register)
        self.post_data['publish_and_add_new'] = 'Publish & Add New'
        response = self.client.post(reverse('admin:blog_post_change', args=[42]), self.post_data)
        self.assertEqual(response.url, reverse('admin:blog_post_changelist'))
        self.post.refresh_from_db()
        self.assertEqual(self.post.status, 'draft')

        response = self.client.get(reverse('admin:blog_post_change', args=[42]))
        self.assertNotContains(response, 'name="publish_and_add_new"')

    def test_create_new_screen(self):
        response = self.client.get(admin_url('create-new?type=note'))
        self.assertContains(response, 'name="publish_and_add_new"')
        self.assertContains(response, '#publishing-and-add-new-action {')
        self.assertContains(response, 'insertBefore')

    def test_edit_screen(self):
        response = self.client.get(reverse('admin:blog_post_change', args=[42]))
        # Button markup is present, the assets revealing it are not
        self.assertContains(response, 'name="publish_and_add_new"')
        self.assertNotContains(response, 'insertBefore')

        self.post.publish()
        response = self.client.get(reverse('admin:blog_post_change', args=[42]))
        self.assertNotContains(response, 'name="publish_and_add_new"')
