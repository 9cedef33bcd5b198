from django.urls import path

from social import views

urlpatterns = [
    path('health', views.health, name='health'),

    path('auth/signup', views.signup, name='signup'),
    path('auth/login', views.login, name='login'),
    path('auth/logout', views.logout, name='logout'),
    path('auth/me', views.me, name='me'),
    path('auth/update-profile', views.update_profile, name='update_profile'),
    path('auth/change-password', views.change_password, name='change_password'),

    path('users', views.user_list, name='user_list'),
    path('users/<int:user_id>', views.user_detail, name='user_detail'),
    path('users/<int:user_id>/follow', views.follow, name='follow'),
    path('users/<int:user_id>/unfollow', views.unfollow, name='unfollow'),
    path('users/<int:user_id>/followers', views.followers, name='followers'),
    path('users/<int:user_id>/following', views.following, name='following'),

    path('posts', views.post_list, name='post_list'),
    path('posts/saved/me', views.saved_posts, name='saved_posts'),
    path('posts/liked/me', views.liked_posts, name='liked_posts'),
    path('posts/<int:post_id>', views.post_detail, name='post_detail'),
    path('posts/<int:post_id>/like', views.like, name='like_post'),
    path('posts/<int:post_id>/save', views.save, name='save_post'),
    path('posts/<int:post_id>/comments', views.add_comment, name='add_comment'),

    path('messages/conversations', views.conversations, name='conversations'),
    path('messages/<int:user_id>', views.thread, name='thread'),
    path('messages/<int:message_id>/read', views.mark_read, name='mark_read'),
]
