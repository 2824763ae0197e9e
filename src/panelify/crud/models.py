"""Database table definitions for stored layouts, recent files, and app settings"""

from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import Column, DateTime, JSON, Text
from sqlmodel import Field, SQLModel


class LayoutRecord(SQLModel, table=True):
    """The saved panel placement for one document, in wire format"""
    __tablename__ = "layouts"
    path: str = Field(..., sa_column=Column(Text, primary_key=True))
    items: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    updated_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class RecentFile(SQLModel, table=True):
    """A recently opened or saved document; newest opened_at first"""
    __tablename__ = "recent_files"
    path: str = Field(..., sa_column=Column(Text, primary_key=True))
    opened_at: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))


class AppSetting(SQLModel, table=True):
    """Normalized key-value pairs for application state (e.g. last opened file)"""
    __tablename__ = "app_settings"
    key: str = Field(primary_key=True)
    value: str = Field(..., sa_column=Column(Text, nullable=False))
