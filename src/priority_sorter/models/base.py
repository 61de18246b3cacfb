"""Declarative base shared by all sorter tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
