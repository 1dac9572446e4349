"""Map image uploads (not persisted)"""
import logging


logger = logging.getLogger(__name__)


class NullImageStore:
    """Accepts uploaded map images and discards them"""

    def save(self, account_id: str, image: str) -> None:
        logger.info(f"🖼️ Image upload for account {account_id} ignored ({len(image)} bytes)")
