"""Tests unitaires pour MessageService et les règles d'accès aux messages."""

import pytest

from domain.exceptions import InvalidReferenceError, NotFoundError, UnauthorizedError


@pytest.fixture
def alice_to_bob(register, message_service):
    register("alice")
    register("bob")
    register("carol")
    return message_service.create("alice", "bob", "hi")


def test_create_then_get(alice_to_bob, message_service):
    assert alice_to_bob.id is not None
    assert alice_to_bob.sent_at is not None
    assert alice_to_bob.read_at is None

    detail = message_service.get(alice_to_bob.id)

    assert detail.body == "hi"
    assert detail.read_at is None
    assert detail.from_user.username == "alice"
    assert detail.to_user.username == "bob"
    assert not hasattr(detail.from_user, "password")


def test_create_with_unknown_user_raises(register, message_service):
    register("alice")

    with pytest.raises(InvalidReferenceError):
        message_service.create("alice", "ghost", "anyone there?")
    with pytest.raises(InvalidReferenceError):
        message_service.create("ghost", "alice", "boo")


def test_get_unknown_message_raises(message_service):
    with pytest.raises(NotFoundError):
        message_service.get(404)


def test_mark_read_sets_read_at_after_sent_at(alice_to_bob, message_service):
    message_service.mark_read(alice_to_bob.id)

    detail = message_service.get(alice_to_bob.id)
    assert detail.read_at is not None
    assert detail.read_at >= detail.sent_at


def test_mark_read_again_overwrites_read_at(alice_to_bob, message_service):
    first = message_service.mark_read(alice_to_bob.id).read_at
    second = message_service.mark_read(alice_to_bob.id).read_at

    # Le dernier appel l'emporte
    assert second > first
    assert message_service.get(alice_to_bob.id).read_at == second


def test_mark_read_unknown_message_raises(message_service):
    with pytest.raises(NotFoundError):
        message_service.mark_read(404)


def test_sender_and_recipient_can_view(alice_to_bob, message_service):
    assert message_service.get_for(alice_to_bob.id, "alice").id == alice_to_bob.id
    assert message_service.get_for(alice_to_bob.id, "bob").id == alice_to_bob.id


def test_third_party_cannot_view_or_mark_read(alice_to_bob, message_service):
    with pytest.raises(UnauthorizedError):
        message_service.get_for(alice_to_bob.id, "carol")
    with pytest.raises(UnauthorizedError):
        message_service.mark_read_by(alice_to_bob.id, "carol")


def test_sender_cannot_mark_read(alice_to_bob, message_service):
    with pytest.raises(UnauthorizedError):
        message_service.mark_read_by(alice_to_bob.id, "alice")

    assert message_service.get(alice_to_bob.id).read_at is None


def test_recipient_marks_read(alice_to_bob, message_service):
    message = message_service.mark_read_by(alice_to_bob.id, "bob")

    assert message.id == alice_to_bob.id
    assert message.read_at is not None


def test_mark_read_by_unknown_message_raises_not_found(message_service):
    with pytest.raises(NotFoundError):
        message_service.mark_read_by(404, "bob")
