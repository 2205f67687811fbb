"""Database client storing oh-my-opencode config records as JSON documents.

The store knows nothing about the typed models: it hands out raw records
(the document plus the storage-assigned ``config_id`` and timestamps) and
accepts raw records for writing. Conversion happens in the adapter.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Column, DateTime, String, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from cli_agent_config.constants import DATABASE_URL, DB_DIR, GLOBAL_CONFIG_ID

Base = declarative_base()


class ProfileConfigModel(Base):
    """SQLAlchemy model for agent profile configs."""

    __tablename__ = "profile_configs"

    id = Column(String, primary_key=True)  # "a1b2c3d4"
    data = Column(JSON, nullable=False)  # record without id/timestamps
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now)


class GlobalConfigModel(Base):
    """SQLAlchemy model for the global config singleton."""

    __tablename__ = "global_configs"

    id = Column(String, primary_key=True)  # always "global"
    data = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=datetime.now)


# Module-level singletons
engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Initialize database tables."""
    DB_DIR.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=engine)


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _profile_record(profile: ProfileConfigModel) -> Dict[str, Any]:
    record = dict(profile.data or {})
    record["config_id"] = profile.id
    record["created_at"] = _iso(profile.created_at)
    record["updated_at"] = _iso(profile.updated_at)
    return record


def _strip_storage_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    storage_keys = {"config_id", "configId", "created_at", "createdAt", "updated_at", "updatedAt"}
    return {key: value for key, value in data.items() if key not in storage_keys}


def insert_profile_record(data: Dict[str, Any]) -> Dict[str, Any]:
    """Store a new profile record and return it with storage-assigned fields."""
    with SessionLocal() as db:
        now = datetime.now()
        profile = ProfileConfigModel(
            id=uuid.uuid4().hex[:8],
            data=_strip_storage_fields(data),
            created_at=now,
            updated_at=now,
        )
        db.add(profile)
        db.commit()
        db.refresh(profile)
        return _profile_record(profile)


def get_profile_record(config_id: str) -> Optional[Dict[str, Any]]:
    """Get a profile record by ID."""
    with SessionLocal() as db:
        profile = db.query(ProfileConfigModel).filter(ProfileConfigModel.id == config_id).first()
        if not profile:
            return None
        return _profile_record(profile)


def list_profile_records() -> List[Dict[str, Any]]:
    """List all profile records, oldest first."""
    with SessionLocal() as db:
        profiles = db.query(ProfileConfigModel).order_by(ProfileConfigModel.created_at.asc()).all()
        return [_profile_record(p) for p in profiles]


def update_profile_record(config_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Replace the stored document of a profile. Returns None if not found."""
    with SessionLocal() as db:
        profile = db.query(ProfileConfigModel).filter(ProfileConfigModel.id == config_id).first()
        if not profile:
            return None
        profile.data = _strip_storage_fields(data)
        profile.updated_at = datetime.now()
        db.commit()
        db.refresh(profile)
        return _profile_record(profile)


def delete_profile_record(config_id: str) -> bool:
    """Delete a profile record."""
    with SessionLocal() as db:
        deleted = db.query(ProfileConfigModel).filter(ProfileConfigModel.id == config_id).delete()
        db.commit()
        return deleted > 0


def set_applied_profile(config_id: str) -> bool:
    """Mark one profile as applied and clear the flag on every other profile."""
    with SessionLocal() as db:
        profiles = db.query(ProfileConfigModel).all()
        if not any(p.id == config_id for p in profiles):
            return False
        for profile in profiles:
            data = dict(profile.data or {})
            data.pop("isApplied", None)
            data["is_applied"] = profile.id == config_id
            profile.data = data
        db.commit()
        return True


def get_global_record() -> Optional[Dict[str, Any]]:
    """Get the global config record, or None if it was never saved."""
    with SessionLocal() as db:
        config = db.query(GlobalConfigModel).filter(GlobalConfigModel.id == GLOBAL_CONFIG_ID).first()
        if not config:
            return None
        record = dict(config.data or {})
        record["config_id"] = config.id
        record["updated_at"] = _iso(config.updated_at)
        return record


def upsert_global_record(data: Dict[str, Any]) -> Dict[str, Any]:
    """Create or replace the global config record."""
    with SessionLocal() as db:
        config = db.query(GlobalConfigModel).filter(GlobalConfigModel.id == GLOBAL_CONFIG_ID).first()
        if config is None:
            config = GlobalConfigModel(id=GLOBAL_CONFIG_ID)
            db.add(config)
        config.data = _strip_storage_fields(data)
        config.updated_at = datetime.now()
        db.commit()
        db.refresh(config)
        record = dict(config.data)
        record["config_id"] = config.id
        record["updated_at"] = _iso(config.updated_at)
        return record
