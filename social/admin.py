from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from social.models import Comment, Follower, Message, Post, User


class CommentInline(admin.TabularInline):
    """Show a post's comments directly on the Post page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ['user', 'text', 'created_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin for the email-keyed user model."""
    ordering = ('-created_at',)
    list_display = ('email', 'name', 'is_online', 'last_seen', 'is_staff')
    list_filter = ('is_online', 'is_staff', 'is_active')
    search_fields = ('email', 'name')
    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {'fields': ('name', 'avatar', 'bio')}),
        ('Presence', {'fields': ('is_online', 'last_seen')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
    )
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('email', 'name', 'password1', 'password2')}),
    )


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    """Admin configuration for posts."""
    list_display = ('short_content', 'author', 'visibility', 'created_at', 'likes_count_display')
    list_filter = ('visibility', 'created_at')
    search_fields = ('content', 'author__email', 'author__name')
    inlines = [CommentInline]

    @admin.display(description='Content')
    def short_content(self, obj):
        """Shorten post content for list display."""
        return obj.content[:50] + '...' if len(obj.content) > 50 else obj.content

    @admin.display(description='Likes')
    def likes_count_display(self, obj):
        return obj.likes_count


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ('sender', 'receiver', 'message_type', 'read', 'created_at')
    list_filter = ('read', 'message_type')
    search_fields = ('content', 'sender__email', 'receiver__email')

    @admin.action(description='Mark selected messages as read')
    def mark_read(self, request, queryset):
        """Mark selected messages read."""
        for message in queryset.filter(read=False):
            message.mark_read()

    actions = ['mark_read']


admin.site.register(Follower)
