"""Helper utilities for assembling seed data objects without hitting the DB too often."""

from random import choice, randint, sample
from typing import List, Sequence

from social.models import Comment, Follower, Message, Post
from .seed_data import comment_phrases, post_image_pool


def create_email(name: str, suffix: int) -> str:
    """Deterministic-looking email for a generated user."""
    local = ".".join(part.lower() for part in name.split() if part.isalpha()) or "user"
    return f"{local}{suffix}@example.org"


class SeedHelpers:
    """Non-DB helpers that create model instances for bulk seeding."""

    def _build_post(self, author_id: int) -> Post:
        """Construct an unsaved Post with randomized fields."""
        return Post(
            author_id=author_id,
            content=self.faker.paragraph(nb_sentences=2)[:1000],
            image=choice(post_image_pool) if randint(0, 2) == 0 else None,
            visibility=Post.VISIBILITY_PUBLIC if randint(0, 4) else Post.VISIBILITY_FOLLOWERS,
        )

    def _build_follow_edges(self, user_ids: Sequence[int], follow_k: int) -> List[Follower]:
        """Each user follows up to follow_k random others."""
        k = max(0, min(follow_k, len(user_ids) - 1))
        rows = []
        for follower_id in user_ids:
            pool = [x for x in user_ids if x != follower_id]
            for author_id in sample(pool, k) if k else []:
                rows.append(Follower(follower_id=follower_id, author_id=author_id))
        return rows

    def _build_comments(self, post_id: int, user_ids: Sequence[int], max_comments: int) -> List[Comment]:
        commenters = sample(list(user_ids), min(len(user_ids), randint(0, max_comments)))
        return [
            Comment(post_id=post_id, user_id=user_id, text=choice(comment_phrases))
            for user_id in commenters
        ]

    def _build_messages(self, a: int, b: int, count: int) -> List[Message]:
        """Alternate `count` messages between users a and b."""
        rows = []
        for i in range(count):
            sender, receiver = (a, b) if i % 2 == 0 else (b, a)
            rows.append(
                Message(
                    sender_id=sender,
                    receiver_id=receiver,
                    content=self.faker.sentence(nb_words=8),
                    read=i < count - 1,
                )
            )
        return rows
