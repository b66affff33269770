import os
from datetime import timedelta
from importlib import import_module, reload
from io import StringIO
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase, RequestFactory
from django.urls import reverse
from django.utils import timezone

from blog.models import Post
from framework.editor import SaveDirective
from framework.hooks import Action, Filter
from framework.nonces import create_nonce, verify_nonce, item_action
from framework.screens import Screen, ScreenMode, get_current_screen
from framework.utils import admin_url


class HookTest(TestCase):
    def test_priority(self):
        calls = []
        action = Action('test')
        action.register(lambda: calls.append('late'), priority=15)
        action.register(lambda: calls.append('first'))
        action.register(lambda: calls.append('second'))
        action.dispatch()
        self.assertEqual(calls, ['first', 'second', 'late'])

    def test_dispatch_skips_empty_fragments(self):
        action = Action('test')
        action.register(lambda screen: None)
        action.register(lambda screen: '<b>')
        self.assertEqual(action.dispatch(Screen()), ['<b>'])

    def test_filter(self):
        hook = Filter('test')
        self.assertEqual(hook.apply('a'), 'a')
        hook.register(lambda value, suffix: value + suffix)
        hook.register(lambda value, suffix: value.upper(), priority=20)
        self.assertEqual(hook.apply('a', 'b'), 'AB')

    def test_unregister(self):
        hook = Filter('test')

        def double(value):
            return value * 2

        hook.register(double)
        hook.register(double, priority=5)
        # Registering again moves the handler instead of adding it twice
        self.assertEqual(hook.apply(2), 4)
        hook.unregister(double)
        self.assertEqual(hook.apply(2), 2)


class NonceTest(TestCase):
    def setUp(self):
        self.user = get_user_model().objects.create(username='editor')
        self.other = get_user_model().objects.create(username='other')

    def test_verify(self):
        nonce = create_nonce(item_action(1), self.user)
        self.assertEqual(verify_nonce(nonce, 'update-item-1', self.user), 1)
        self.assertFalse(verify_nonce(nonce, 'update-item-2', self.user))
        self.assertFalse(verify_nonce(nonce, 'update-item-1', self.other))
        self.assertFalse(verify_nonce('', 'update-item-1', self.user))

    def test_lifetime(self):
        now = 1700000000
        with mock.patch('time.time', return_value=now), self.settings(NONCE_LIFETIME=100):
            nonce = create_nonce('action', self.user)
        with mock.patch('time.time', return_value=now + 50), self.settings(NONCE_LIFETIME=100):
            self.assertEqual(verify_nonce(nonce, 'action', self.user), 2)
        with mock.patch('time.time', return_value=now + 150), self.settings(NONCE_LIFETIME=100):
            self.assertFalse(verify_nonce(nonce, 'action', self.user))


class LocalSettingsTest(TestCase):
    def test_secret_key_from_environment(self):
        environ = {key: value for key, value in os.environ.items() if key != 'DJANGO_SECRET_KEY'}
        with mock.patch.dict(os.environ, environ, clear=True):
            local = reload(import_module('config.settings.local'))
        self.assertEqual(local.SECRET_KEY, '')

        with mock.patch.dict(os.environ, {'DJANGO_SECRET_KEY': 'from-env'}):
            local = reload(import_module('config.settings.local'))
        self.assertEqual(local.SECRET_KEY, 'from-env')


class ScreenTest(TestCase):
    def test_default_screen(self):
        request = RequestFactory().get('/')
        self.assertEqual(get_current_screen(request).mode, ScreenMode.OTHER)
        request.screen = Screen(ScreenMode.CREATE_NEW, 'note')
        self.assertEqual(get_current_screen(request).post_type, 'note')

    def test_admin_url(self):
        self.assertEqual(admin_url('create-new?type=note'), '/admin/create-new?type=note')
        self.assertEqual(admin_url('/create-new'), '/admin/create-new')


class SaveDirectiveTest(TestCase):
    def test_copy(self):
        post = Post(pk=3, title='Title', post_type='page', status='draft')
        directive = SaveDirective.from_instance(post)
        published = directive.with_status('publish')
        self.assertEqual(directive.status, 'draft')
        self.assertEqual(published, SaveDirective(id=3, post_type='page', status='publish', title='Title'))
        published.apply_to(post)
        self.assertEqual(post.status, 'publish')


class EditorAdminTest(TestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_superuser('admin', 'a.b@c.de', 'password')
        self.client.force_login(self.user)

    def test_create_new(self):
        response = self.client.get(admin_url('create-new?type=note'))
        self.assertEqual(response.status_code, 200)

        # An auto-draft got created and its change form is shown
        post = Post.objects.get()
        self.assertEqual(post.status, 'auto-draft')
        self.assertEqual(post.post_type, 'note')
        self.assertEqual(post.author, self.user)
        self.assertContains(response, create_nonce(item_action(post.pk), self.user))
        self.assertContains(response, reverse('admin:blog_post_change', args=[post.pk]))
        self.assertEqual(response.wsgi_request.screen, Screen(ScreenMode.CREATE_NEW, 'note'))

    def test_invalid_type(self):
        response = self.client.get(admin_url('create-new?type=bogus'))
        self.assertRedirects(response, reverse('admin:blog_post_changelist'))
        self.assertFalse(Post.objects.exists())

    def test_staff_only(self):
        user = get_user_model().objects.create_user('reader', 'r@c.de', 'password')
        self.client.force_login(user)
        response = self.client.get(admin_url('create-new?type=note'))
        self.assertEqual(response.status_code, 302)
        self.assertFalse(Post.objects.exists())

    def test_add_view_redirects(self):
        response = self.client.get(reverse('admin:blog_post_add') + '?type=page')
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.url, '/admin/create-new?type=page')

    def test_auto_draft_promotion(self):
        post = Post.objects.create(title='', post_type='post', status='auto-draft', author=self.user)
        post_data = {
            'title': 'Saved',
            'description': '',
            'text': '',
            'status': 'auto-draft',
            'publish_date': '',
            'author': self.user.pk,
            '_save': 'Save',
        }
        response = self.client.post(reverse('admin:blog_post_change', args=[post.pk]), post_data)
        self.assertRedirects(response, reverse('admin:blog_post_changelist'))
        post.refresh_from_db()
        self.assertEqual(post.status, 'draft')
        self.assertEqual(post.title, 'Saved')

    def test_edit_screen(self):
        post = Post.objects.create(title='Existing', post_type='post', status='draft')
        response = self.client.get(reverse('admin:blog_post_change', args=[post.pk]))
        self.assertEqual(response.wsgi_request.screen.mode, ScreenMode.EDIT_EXISTING)


class DeleteAutoDraftsTest(TestCase):
    def test_delete(self):
        old = Post.objects.create(title='', status='auto-draft')
        Post.objects.filter(pk=old.pk).update(created=timezone.now() - timedelta(days=8))
        recent = Post.objects.create(title='', status='auto-draft')
        draft = Post.objects.create(title='Draft', status='draft')
        Post.objects.filter(pk=draft.pk).update(created=timezone.now() - timedelta(days=8))

        call_command('delete_auto_drafts', stdout=StringIO())
        self.assertEqual(set(Post.objects.values_list('pk', flat=True)), {recent.pk, draft.pk})
