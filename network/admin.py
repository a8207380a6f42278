from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from network.models import Comment, Post, Profile, User


@admin.register(User)
class NetworkUserAdmin(UserAdmin):
    """User admin with the display name and avatar shown alongside the login fields."""
    list_display = ('username', 'name', 'email', 'is_staff', 'date_joined')
    search_fields = ('username', 'name', 'email')
    fieldsets = UserAdmin.fieldsets + (("Showcase", {"fields": ("name", "avatar")}),)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'location', 'github_username', 'date')
    search_fields = ('user__name', 'user__email', 'github_username')
    raw_id_fields = ('user',)


class CommentInline(admin.TabularInline):
    """Show comments directly on the Post page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ['user', 'name', 'text', 'date']


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin configuration for posts with a like counter."""
    list_display = ('title', 'user', 'date', 'likes_display')
    list_filter = ('date',)
    search_fields = ('title', 'description', 'user__name')
    raw_id_fields = ('user',)
    inlines = [CommentInline]

    def likes_display(self, obj):
        """Return the number of likes on the post."""
        return obj.likes_count
    likes_display.short_description = "Likes"


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('short_text', 'name', 'post', 'date')
    search_fields = ('text', 'name')
    raw_id_fields = ('post', 'user')

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.text[:50] + "..." if len(obj.text) > 50 else obj.text
