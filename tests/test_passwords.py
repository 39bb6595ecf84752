# tests/test_passwords.py
from catalog.passwords import hash_password, verify_password

def test_hash_is_salted():
    first = hash_password("yabbadabbadoo")
    second = hash_password("yabbadabbadoo")
    assert first != second
    assert first.startswith("$2")

def test_verify():
    hashed = hash_password("yabbadabbadoo")
    assert verify_password("yabbadabbadoo", hashed)
    assert not verify_password("wrong", hashed)

def test_verify_rejects_empty_and_malformed():
    assert not verify_password("", hash_password("x"))
    assert not verify_password("x", "")
    assert not verify_password("x", "not-a-bcrypt-hash")

def test_long_passwords():
    password = "p" * 100
    assert verify_password(password, hash_password(password))
