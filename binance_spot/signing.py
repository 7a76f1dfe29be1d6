import base64
import hashlib
import hmac
from typing import Optional, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey
from cryptography.hazmat.primitives.serialization import load_pem_private_key

PrivateKey = Union[Ed25519PrivateKey, RSAPrivateKey]


def load_private_key(data: Union[str, bytes], password: Optional[str] = None) -> PrivateKey:
    """从 PEM 内容加载私钥，仅支持 Ed25519 与 RSA。"""
    if isinstance(data, str):
        data = data.encode()
    private_key = load_pem_private_key(
        data=data,
        password=password.encode() if password else None,
    )
    if not isinstance(private_key, (Ed25519PrivateKey, RSAPrivateKey)):
        raise ValueError(f"不支持的私钥类型: {type(private_key).__name__}")
    return private_key


def load_private_key_file(path: str, password: Optional[str] = None) -> PrivateKey:
    with open(path, "rb") as f:
        return load_private_key(f.read(), password)


def hmac_signature(secret: str, payload: str) -> str:
    return hmac.new(secret.encode(), payload.encode(), hashlib.sha256).hexdigest()


def private_key_signature(private_key: PrivateKey, payload: str) -> str:
    if isinstance(private_key, Ed25519PrivateKey):
        signature = private_key.sign(payload.encode("ASCII"))
    else:
        signature = private_key.sign(payload.encode("ASCII"), padding.PKCS1v15(), hashes.SHA256())
    return base64.b64encode(signature).decode("ascii")
