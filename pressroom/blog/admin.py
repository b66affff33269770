from django.contrib import admin

from .models import Post
from framework.admin import EditorAdmin


class PostAdmin(EditorAdmin):
    search_fields = ['title']
    list_display = ['title', 'post_type', 'status', 'publish_date', 'author']
    list_filter = ['post_type', 'status']
    raw_id_fields = ['author']


admin.site.register(Post, PostAdmin)
