from django.urls import path

from network.views import posts_api, profile_api, users_api

urlpatterns = [
    path('users/', users_api.signup, name='signup'),
    path('auth/', users_api.current_user, name='current_user'),

    path('profile/', profile_api.profiles, name='profiles'),
    path('profile/me/', profile_api.my_profile, name='my_profile'),
    path('profile/user/<int:user_id>/', profile_api.profile_by_user, name='profile_by_user'),
    path('profile/github/<str:username>/', profile_api.github_repos, name='github_repos'),
    path('profile/follow/<int:user_id>/', profile_api.follow, name='follow'),
    path('profile/unfollow/<int:user_id>/', profile_api.unfollow, name='unfollow'),
    path('profile/<uuid:profile_id>/followers/', profile_api.followers, name='profile_followers'),
    path('profile/<uuid:profile_id>/following/', profile_api.following, name='profile_following'),

    path('posts/', posts_api.posts, name='posts'),
    path('posts/feed/', posts_api.feed, name='feed'),
    path('posts/user/<int:user_id>/', posts_api.posts_by_user, name='posts_by_user'),
    path('posts/like/<uuid:post_id>/', posts_api.like, name='like_post'),
    path('posts/unlike/<uuid:post_id>/', posts_api.unlike, name='unlike_post'),
    path('posts/comment/<uuid:post_id>/', posts_api.add_comment, name='add_comment'),
    path('posts/comment/<uuid:post_id>/<uuid:comment_id>/', posts_api.delete_comment, name='delete_comment'),
    path('posts/<uuid:post_id>/', posts_api.post_detail, name='post_detail'),
]
