import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import social.models.user
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
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("name", models.CharField(max_length=50, validators=[django.core.validators.MinLengthValidator(2)])),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("avatar", models.URLField(blank=True, default="", max_length=500)),
                ("bio", models.TextField(blank=True, default="", help_text="short user bio shown on profile", max_length=200, validators=[django.core.validators.MaxLengthValidator(200)])),
                ("is_online", models.BooleanField(default=False)),
                ("last_seen", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
            managers=[
                ("objects", social.models.user.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField(max_length=1000)),
                ("image", models.URLField(blank=True, max_length=500, null=True)),
                ("visibility", models.CharField(choices=[("public", "Public"), ("followers", "Followers only"), ("private", "Private")], default="public", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="posts", to=settings.AUTH_USER_MODEL)),
                ("likes", models.ManyToManyField(blank=True, related_name="liked_posts", to=settings.AUTH_USER_MODEL)),
                ("saved_by", models.ManyToManyField(blank=True, related_name="saved_posts", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "post",
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["visibility", "-created_at"], name="post_visibil_0c1f6e_idx")],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("text", models.TextField(max_length=500)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("post", models.ForeignKey(db_column="post_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="social.post")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comment",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="Follower",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(db_column="author_id", on_delete=django.db.models.deletion.CASCADE, related_name="followers", to=settings.AUTH_USER_MODEL)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "followers",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["follower"], name="followers_followe_5a8a43_idx"),
                    models.Index(fields=["author"], name="followers_author__c2d8d4_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "author"), name="uniq_followers_follower_author"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("author")), _negated=True), name="chk_followers_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField()),
                ("message_type", models.CharField(choices=[("text", "Text"), ("image", "Image"), ("audio", "Audio"), ("video", "Video")], default="text", max_length=10)),
                ("read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("receiver", models.ForeignKey(db_column="receiver_id", on_delete=django.db.models.deletion.CASCADE, related_name="received_messages", to=settings.AUTH_USER_MODEL)),
                ("sender", models.ForeignKey(db_column="sender_id", on_delete=django.db.models.deletion.CASCADE, related_name="sent_messages", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "message",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["sender", "receiver", "-created_at"], name="message_sender__7b1e2a_idx"),
                    models.Index(fields=["receiver", "read"], name="message_receive_4e9d0c_idx"),
                ],
            },
        ),
    ]
