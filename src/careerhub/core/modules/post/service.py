import structlog

from careerhub.core.core import Service
from careerhub.core.modules.post.models import PostCreate, PostRecord, PostUpdate, new_post_record
from careerhub.errors import NotFoundError, PersistError, StorageError, ValidationError

logger = structlog.get_logger(__name__)


class PostService(Service):
    """CRUD over the posts collection stored as a single JSON file.

    Every operation loads the whole file and every mutation rewrites it. There is no
    lock across requests: when two mutations interleave, the last save wins and the
    other change is lost. That is accepted for a single admin editing a small list.

    Only request data is validated. Stored records are served as they are.
    """

    async def on_start(self) -> None:
        await self.storage.ensure_exists()
        logger.debug("post_service_started", path=str(self.storage.path))

    async def list_posts(self) -> list[PostRecord]:
        """Get all posts, newest first. An unreadable file reads as an empty list."""
        return await self._load()

    async def get_post(self, post_id: str) -> PostRecord:
        """Get a post by ID."""
        records = await self._load()
        record = next((r for r in records if r.get("id") == post_id), None)
        if record is None:
            raise NotFoundError("Post not found")
        return record

    async def create_post(self, data: PostCreate) -> PostRecord:
        """Assign an ID and publication date, prepend to the collection, and save."""
        records = await self._load()
        record = new_post_record(data)
        records.insert(0, record)
        await self._save(records)
        logger.info("post_created", post_id=record["id"], title=record.get("title"))
        return record

    async def update_post(self, post_id: str, data: PostUpdate) -> PostRecord:
        """Merge the provided fields into a post in place and save."""
        records = await self._load()
        index = next((i for i, r in enumerate(records) if r.get("id") == post_id), None)
        if index is None:
            raise NotFoundError("Post not found")

        changes = data.changes()
        if "title" in changes and changes["title"] is None:
            raise ValidationError("Post title cannot be removed")
        merged = {**records[index], **changes}
        records[index] = merged
        await self._save(records)
        logger.info("post_updated", post_id=post_id, fields=sorted(changes))
        return merged

    async def delete_post(self, post_id: str) -> None:
        """Remove a post from the collection and save."""
        records = await self._load()
        remaining = [r for r in records if r.get("id") != post_id]
        if len(remaining) == len(records):
            raise NotFoundError("Post not found")
        await self._save(remaining)
        logger.info("post_deleted", post_id=post_id)

    async def _load(self) -> list[PostRecord]:
        try:
            records = await self.storage.load_collection()
        except StorageError as e:
            logger.warning("posts_read_failed", error=str(e))
            return []
        return [r for r in records if isinstance(r, dict)]

    async def _save(self, records: list[PostRecord]) -> None:
        try:
            await self.storage.save_collection(records)
        except StorageError as e:
            logger.exception("posts_write_failed", error=str(e))
            raise PersistError from e
