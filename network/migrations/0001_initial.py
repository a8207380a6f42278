import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
import network.models.follow_edges
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("username", models.CharField(error_messages={"unique": "A user with that username already exists."}, help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.", max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name="username")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("name", models.CharField(max_length=100)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("avatar", models.CharField(blank=True, max_length=500)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "verbose_name": "user",
                "verbose_name_plural": "users",
                "ordering": ["name", "id"],
                "abstract": False,
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Profile",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("bio", models.TextField()),
                ("website", models.CharField(blank=True, default="", max_length=255)),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                ("skills", models.JSONField(blank=True, default=list)),
                ("github_username", models.CharField(blank=True, default="", max_length=100)),
                ("social", models.JSONField(blank=True, default=dict)),
                ("date", models.DateTimeField(auto_now_add=True)),
                ("user", models.OneToOneField(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "profile",
            },
        ),
        migrations.CreateModel(
            name="Following",
            fields=[
                ("id", models.UUIDField(default=network.models.follow_edges._uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("following", models.ForeignKey(db_column="following_id", on_delete=django.db.models.deletion.CASCADE, related_name="+", to="network.profile")),
                ("profile", models.ForeignKey(db_column="profile_id", on_delete=django.db.models.deletion.CASCADE, related_name="following_edges", to="network.profile")),
            ],
            options={
                "db_table": "following",
            },
        ),
        migrations.CreateModel(
            name="Follower",
            fields=[
                ("id", models.UUIDField(default=network.models.follow_edges._uuid7_or_4, editable=False, primary_key=True, serialize=False)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="+", to="network.profile")),
                ("profile", models.ForeignKey(db_column="profile_id", on_delete=django.db.models.deletion.CASCADE, related_name="follower_edges", to="network.profile")),
            ],
            options={
                "db_table": "followers",
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("images", models.JSONField(blank=True, default=list)),
                ("tech_tags", models.JSONField(default=list)),
                ("website_url", models.URLField(max_length=500)),
                ("repo_url", models.URLField(blank=True, default="", max_length=500)),
                ("date", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "post",
                "ordering": ["-date"],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("avatar", models.CharField(blank=True, max_length=500)),
                ("text", models.TextField()),
                ("date", models.DateTimeField(auto_now_add=True)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="network.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comment",
                "ordering": ["-date"],
            },
        ),
        migrations.CreateModel(
            name="Like",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="network.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "like",
            },
        ),
        migrations.AddConstraint(
            model_name="following",
            constraint=models.UniqueConstraint(fields=("profile", "following"), name="uniq_following_profile_following"),
        ),
        migrations.AddConstraint(
            model_name="following",
            constraint=models.CheckConstraint(condition=models.Q(("profile", models.F("following")), _negated=True), name="chk_following_not_self"),
        ),
        migrations.AddConstraint(
            model_name="follower",
            constraint=models.UniqueConstraint(fields=("profile", "follower"), name="uniq_followers_profile_follower"),
        ),
        migrations.AddConstraint(
            model_name="follower",
            constraint=models.CheckConstraint(condition=models.Q(("profile", models.F("follower")), _negated=True), name="chk_followers_not_self"),
        ),
        migrations.AddConstraint(
            model_name="like",
            constraint=models.UniqueConstraint(fields=("post", "user"), name="uniq_like_post_user"),
        ),
    ]
