"""
Blog API - BlogPost SQLAlchemy Model
======================================

What:  ORM model representing the `blog` table.
Who:   Used by SqlAlchemyBlogRepository for statements and by create_tables().

Table Design:
    - id: auto-increment integer primary key, assigned by the database
    - title / content: TEXT NOT NULL; presence is enforced before insert
    - thumbsup: vote counter, only changed through `thumbsup = thumbsup + :delta`
"""

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.database import Base

# Upper bound of the Integer (int4) id column; larger ids cannot exist
MAX_BLOG_ID = 2_147_483_647


class BlogPost(Base):
    """
    A single blog post.

    Lifecycle:
        1. Created by POST /blogs/POST (thumbsup = 0)
        2. title/content overwritten by PATCH /blogs/{id}
        3. thumbsup moved by ±1 via PATCH /blogs/UPDATE_THUMBSUP/{id}
        4. Removed by DELETE /blogs/{id} (hard delete, no versioning)
    """

    __tablename__ = "blog"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # The counter may go negative; there is no clamp.
    thumbsup: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    def __repr__(self) -> str:
        return f"<BlogPost(id={self.id}, title='{self.title}', thumbsup={self.thumbsup})>"
