"""Service for managing user word collections."""
import logging
from typing import List, Optional

from vocabprogress.models.progress_models import Collection, WordProgress
from vocabprogress.services.store import ProgressStore

logger = logging.getLogger(__name__)


class CollectionService:
    """Service for creating collections and filing words into them."""

    def __init__(self, store: ProgressStore):
        """Initialize the service with the progress store."""
        self.store = store

    def get_collection(self, collection_id: str) -> Optional[Collection]:
        """Get a collection by its ID."""
        return next((c for c in self.store.state.collections if c.id == collection_id), None)

    def list_collections(self) -> List[Collection]:
        """Get all collections in creation order."""
        return list(self.store.state.collections)

    def create_collection(self, name: str) -> str:
        """Create an empty collection and return its ID."""
        now = self.store.now_ms()
        collection_id = f"col_{now}"
        suffix = 1
        while self.get_collection(collection_id) is not None:
            collection_id = f"col_{now}_{suffix}"
            suffix += 1

        self.store.state.collections.append(Collection(id=collection_id, name=name, created_at=now))
        logger.debug(f"Collection {collection_id} created: {name}")
        self.store.commit()
        return collection_id

    def delete_collection(self, collection_id: str) -> None:
        """Delete a collection and detach it from its words."""
        collection = self.get_collection(collection_id)
        if collection is None:
            logger.debug(f"Collection {collection_id} not found, nothing to delete")
            return

        self.store.state.collections.remove(collection)
        for state in self.store.state.word_states.values():
            if collection_id in state.collections:
                state.collections.remove(collection_id)
        logger.debug(f"Collection {collection_id} deleted")
        self.store.commit()

    def add_to_collection(self, word_id: str, collection_id: str) -> WordProgress:
        """Add a word to a collection."""
        state = self.store.ensure_word_state(word_id)
        if collection_id in state.collections:
            return state

        state.collections.append(collection_id)
        collection = self.get_collection(collection_id)
        if collection is not None:
            collection.word_ids.append(word_id)
        else:
            logger.debug(f"Collection {collection_id} not found, word {word_id} tagged only")
        self.store.commit()
        return state

    def remove_from_collection(self, word_id: str, collection_id: str) -> WordProgress:
        """Remove a word from a collection."""
        state = self.store.ensure_word_state(word_id)
        state.collections = [c for c in state.collections if c != collection_id]
        collection = self.get_collection(collection_id)
        if collection is not None:
            collection.word_ids = [w for w in collection.word_ids if w != word_id]
        self.store.commit()
        return state
