from datetime import date, timedelta

from django.test import TestCase

from blog.models import Post


class PublishTest(TestCase):
    def setUp(self):
        self.post = Post.objects.create(title='Testpost', text='test.')

    def test_publish(self):
        """
        Test if publishing stamps the publish date.
        """
        self.assertEqual(self.post.status, 'draft')
        self.assertIsNone(self.post.publish_date)
        self.post.publish()
        self.assertEqual(self.post.status, 'publish')
        self.assertEqual(self.post.get_status_display(), 'Published')
        self.assertEqual(self.post.publish_date, date.today())

    def test_keep_publish_date(self):
        publish_date = date.today() - timedelta(days=3)
        post = Post.objects.create(title='Old', status='publish', publish_date=publish_date)
        self.assertEqual(post.publish_date, publish_date)


class ManagerTest(TestCase):
    def test_published(self):
        published = Post.objects.create(title='Published', status='publish')
        draft = Post.objects.create(title='Draft', status='draft')
        Post.objects.create(title='', status='auto-draft')
        Post.objects.create(title='Later', status='publish', publish_date=date.today() + timedelta(days=1))

        self.assertEqual(list(Post.objects.published()), [published])
        self.assertEqual(list(Post.objects.unpublished()), [draft])
        self.assertEqual(list(Post.objects.unpublished(post_type='page')), [])
