"""Saved lists and their hotel memberships."""

from sqlalchemy import Boolean, Column, ForeignKey, String, false
from sqlalchemy.orm import relationship

from hotelbook.models.base import Base, TimestampMixin, UUIDMixin


class SavedList(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "lists"

    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    # At most one default list per user; kept by the list store, not the schema.
    is_default = Column(Boolean, nullable=False, default=False, server_default=false())

    # Relationships
    items = relationship("ListItem", back_populates="saved_list", order_by="ListItem.created_at")


class ListItem(TimestampMixin, Base):
    __tablename__ = "list_items"

    list_id = Column(String(36), ForeignKey("lists.id"), primary_key=True)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), primary_key=True)

    # Relationships
    saved_list = relationship("SavedList", back_populates="items")
