"""
Modèles SQLAlchemy - Tables users et messages
"""

from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()


class UserModel(Base):
    """Modèle SQLAlchemy pour les utilisateurs"""
    __tablename__ = "users"

    username = Column(String, primary_key=True)
    password = Column(Text, nullable=False)  # hachage, jamais le mot de passe en clair
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    join_at = Column(DateTime, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    sent_messages = relationship(
        "MessageModel",
        foreign_keys="MessageModel.from_username",
        back_populates="from_user"
    )
    received_messages = relationship(
        "MessageModel",
        foreign_keys="MessageModel.to_username",
        back_populates="to_user"
    )


class MessageModel(Base):
    """Modèle SQLAlchemy pour les messages"""
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    from_username = Column(String, ForeignKey("users.username"), nullable=False, index=True)
    to_username = Column(String, ForeignKey("users.username"), nullable=False, index=True)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime, nullable=False)
    read_at = Column(DateTime, nullable=True)

    from_user = relationship(
        "UserModel",
        foreign_keys=[from_username],
        back_populates="sent_messages"
    )
    to_user = relationship(
        "UserModel",
        foreign_keys=[to_username],
        back_populates="received_messages"
    )
