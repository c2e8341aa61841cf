from nacl.signing import SigningKey
from nacl.encoding import HexEncoder

from minitoken.address import address_from_verify_key


def create_wallet():
    sk = SigningKey.generate()
    return sk, address_from_verify_key(sk.verify_key)


def load_wallet(private_key_hex: str):
    """Rebuild a wallet from a hex-encoded Ed25519 seed."""
    sk = SigningKey(private_key_hex.encode(), encoder=HexEncoder)
    return sk, address_from_verify_key(sk.verify_key)


def private_key_hex(sk: SigningKey) -> str:
    return sk.encode(encoder=HexEncoder).decode()
