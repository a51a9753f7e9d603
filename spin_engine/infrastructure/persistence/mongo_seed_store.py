"""MongoDB seed store implementation"""
import time
import logging
from typing import Optional, Tuple
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from spin_engine.application.ports.seed_store_port import SeedStorePort
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.seed_record import SeedRecord
from spin_engine.domain.errors import CommitmentMismatch, InvalidInput, NonceReuse, SeedNotFound
from spin_engine.infrastructure.persistence.memory_seed_store import DEFAULT_NONCE_STRIDE, new_seed_record

logger = logging.getLogger(__name__)


class MongoSeedStore(SeedStorePort):
    """MongoDB implementation of the seed store

    Active pairs live in `seed_pairs` (one document per player); retired pairs
    move to `revealed_seeds`. Nonce reservation is a single conditional
    find_one_and_update, which MongoDB applies atomically per document.
    """

    def __init__(self, db: Database, nonce_stride: int = DEFAULT_NONCE_STRIDE):
        self.db = db
        self.collection = db.seed_pairs
        self.revealed = db.revealed_seeds
        self.nonce_stride = nonce_stride

    def ensure_indexes(self) -> None:
        """Create the unique player index"""
        self.collection.create_index([("player_id", ASCENDING)], unique=True)
        self.revealed.create_index([("player_id", ASCENDING), ("revealed_at", ASCENDING)])
        self.revealed.create_index([("server_seed_hash", ASCENDING)], unique=True)

    def get_active(self, player_id: str) -> Optional[SeedRecord]:
        """Get active seed record from MongoDB"""
        doc = self.collection.find_one({"player_id": player_id})
        return SeedRecord.from_dict(doc) if doc else None

    def create(self, player_id: str, client_seed: Optional[str] = None) -> SeedRecord:
        """Insert a new active record unless one already exists"""
        record = new_seed_record(player_id, client_seed)
        try:
            self.collection.insert_one(record.to_dict())
            logger.info(f"Created seed pair for player {player_id}")
            return record
        except DuplicateKeyError:
            existing = self.get_active(player_id)
            if existing is None:
                raise
            return existing

    def reserve_nonce(self, player_id: str, server_seed_hash: str, nonce: Optional[int] = None) -> SeedPair:
        """Atomically claim the next nonce under the given commitment"""
        query = {"player_id": player_id, "server_seed_hash": server_seed_hash}
        if nonce is not None:
            query["next_nonce"] = nonce
        doc = self.collection.find_one_and_update(
            query,
            {
                "$inc": {"next_nonce": self.nonce_stride},
                "$set": {"updated_at": time.time()}
            },
            return_document=ReturnDocument.BEFORE
        )
        if doc is None:
            current = self.get_active(player_id)
            if current is None:
                raise SeedNotFound(f"No active seed pair for player {player_id}")
            if current.server_seed_hash != server_seed_hash:
                raise CommitmentMismatch(
                    "Server seed hash is not the active commitment",
                    details={"active_server_seed_hash": current.server_seed_hash}
                )
            raise NonceReuse(
                f"Nonce {nonce} is not available; next nonce is {current.next_nonce}",
                details={"next_nonce": current.next_nonce}
            )
        return SeedRecord.from_dict(doc).seed_pair(doc.get("next_nonce", 0))

    def rotate(self, player_id: str, client_seed: Optional[str] = None) -> Tuple[SeedRecord, SeedRecord]:
        """Archive the active pair, swap in a new one, then mark the archive revealed

        The old server seed is written to `revealed_seeds` before it leaves
        `seed_pairs`, so a failure at any step never loses a seed that spins
        were played under. An archive with `revealed_at` unset is a rotation
        that did not finish.
        """
        current = self.get_active(player_id)
        if current is None:
            raise SeedNotFound(f"No active seed pair for player {player_id}")
        archive_filter = {"server_seed_hash": current.server_seed_hash}
        # Insert-only, so a stale rotation never overwrites a finished reveal
        self.revealed.update_one(archive_filter, {"$setOnInsert": current.to_dict()}, upsert=True)

        new_record = new_seed_record(player_id, client_seed or current.client_seed)
        # Conditional on the old hash so two concurrent rotations cannot both reveal
        old_doc = self.collection.find_one_and_replace(
            {"player_id": player_id, "server_seed_hash": current.server_seed_hash},
            new_record.to_dict(),
            return_document=ReturnDocument.BEFORE
        )
        if old_doc is None:
            raise CommitmentMismatch("Seed pair changed during rotation; retry")

        revealed = SeedRecord.from_dict(old_doc).revealed(time.time())
        self.revealed.replace_one(archive_filter, revealed.to_dict(), upsert=True)
        logger.info(f"Revealed server seed {revealed.server_seed_hash[:16]} for player {player_id}")
        return revealed, new_record

    def set_client_seed(self, player_id: str, client_seed: str) -> SeedRecord:
        """Change client seed only while no nonce has been used"""
        doc = self.collection.find_one_and_update(
            {"player_id": player_id, "next_nonce": 0},
            {"$set": {"client_seed": client_seed, "updated_at": time.time()}},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            if self.get_active(player_id) is None:
                raise SeedNotFound(f"No active seed pair for player {player_id}")
            raise InvalidInput("Client seed can only change before the first spin under a server seed; rotate first")
        return SeedRecord.from_dict(doc)
