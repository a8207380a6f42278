from rest_framework import serializers

from network.models import Comment, Post, Profile, User


class UserSummarySerializer(serializers.ModelSerializer):
    """Author/liker projection: id, display name and avatar only."""

    class Meta:
        model = User
        fields = ["id", "name", "avatar"]


class AccountSerializer(serializers.ModelSerializer):
    """The signed-in user's own account."""

    class Meta:
        model = User
        fields = ["id", "name", "email", "avatar", "date_joined"]


class CommentSerializer(serializers.ModelSerializer):
    """Comment with the author snapshot taken when it was written."""
    user = serializers.IntegerField(source="user_id", read_only=True)
    post = serializers.UUIDField(source="post_id", read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "post", "user", "name", "avatar", "text", "date"]


class PostSerializer(serializers.ModelSerializer):
    """Post joined with its author's name and avatar."""
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "user",
            "title",
            "description",
            "images",
            "tech_tags",
            "website_url",
            "repo_url",
            "date",
        ]


class PostDetailSerializer(PostSerializer):
    """Post with its comments and likers."""
    comments = CommentSerializer(many=True, read_only=True)
    likes = serializers.SerializerMethodField()

    class Meta(PostSerializer.Meta):
        fields = PostSerializer.Meta.fields + ["comments", "likes"]

    def get_likes(self, obj):
        return UserSummarySerializer([like.user for like in obj.likes.all()], many=True).data


class ProfileSummarySerializer(serializers.ModelSerializer):
    """Profile row in follower/following lists."""
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Profile
        fields = ["id", "user", "bio", "location", "skills"]


class ProfileSerializer(serializers.ModelSerializer):
    """Full profile with its user; follow lists are added by the view."""
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = Profile
        fields = [
            "id",
            "user",
            "bio",
            "website",
            "location",
            "skills",
            "github_username",
            "social",
            "date",
        ]
