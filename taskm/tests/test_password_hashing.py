from __future__ import annotations

from taskm.application.services.password_hashing import WerkzeugPasswordHasher


def test_hash_is_salted_and_verifiable() -> None:
    hasher = WerkzeugPasswordHasher()

    first = hasher.hash("pw1")
    second = hasher.hash("pw1")

    assert first.startswith("scrypt:")
    assert first != second
    assert "pw1" not in first
    assert hasher.verify("pw1", first)
    assert not hasher.verify("pw2", first)
