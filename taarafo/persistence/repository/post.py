"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from taarafo.domain.model import Post
from taarafo.domain.repository.post import PostRepository
from taarafo.domain.value import PostId
from taarafo.persistence.mappers import post_to_dict, row_to_post
from taarafo.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository.

    Statements run immediately on the request session, so driver errors
    surface from the call that caused them rather than at commit time.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span("post_repository.insert", post_id=str(post.id)):
            stmt = insert(posts_table).values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Post inserted", post_id=str(post.id))
            return post

    async def select_all(self) -> List[Post]:
        """Select every post, newest first."""
        with logfire.span("post_repository.select_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.created_date))
            result = await self.session.execute(stmt)
            rows = result.fetchall()

            posts = [row_to_post(row._asdict()) for row in rows]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def select_by_id(self, post_id: PostId) -> Optional[Post]:
        """Select a post by ID."""
        with logfire.span("post_repository.select_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def update(self, post: Post) -> Post:
        """Overwrite a stored post.

        Raises:
            StaleDataError: If no row matched, i.e. the post was removed
                after it was read
        """
        with logfire.span("post_repository.update", post_id=str(post.id)):
            values = post_to_dict(post)
            values.pop("id")
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**values)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                raise StaleDataError(
                    f"UPDATE statement on table 'posts' expected to update 1 row(s); "
                    f"0 were matched (post {post.id})."
                )

            await self.session.flush()
            logfire.info("Post updated", post_id=str(post.id))
            return row_to_post(row._asdict())

    async def delete(self, post: Post) -> Post:
        """Delete a stored post (hard delete).

        Raises:
            StaleDataError: If no row matched, i.e. the post was removed
                after it was read
        """
        with logfire.span("post_repository.delete", post_id=str(post.id)):
            stmt = (
                delete(posts_table)
                .where(posts_table.c.id == post.id)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                raise StaleDataError(
                    f"DELETE statement on table 'posts' expected to delete 1 row(s); "
                    f"0 were matched (post {post.id})."
                )

            await self.session.flush()
            logfire.info("Post deleted", post_id=str(post.id))
            return row_to_post(row._asdict())
