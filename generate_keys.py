#!/usr/bin/env python
"""Create the RSA key pair used to sign and verify login tokens."""
import sys
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

sys.path.insert(0, str(Path(__file__).resolve().parent))

from todo_api import config

private_path = Path(config.PRIVATE_KEY_PATH)
public_path = Path(config.PUBLIC_KEY_PATH)

if private_path.exists():
    print(f"Key already exists: {private_path}")
    sys.exit(0)

key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
private_path.parent.mkdir(parents=True, exist_ok=True)
public_path.parent.mkdir(parents=True, exist_ok=True)
private_path.write_bytes(
    key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
)
public_path.write_bytes(
    key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
)
print(f"Keys written: {private_path}, {public_path}")
