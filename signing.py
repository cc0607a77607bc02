"""
signing.py

ECDSA over a Curve from curves.py, built on the generic group law.

The message scalar comes from SHA-256 and the ephemeral scalar from the
secrets module. NOT FOR PRODUCTION: nothing here runs in constant time.
"""

import logging
import secrets
from typing import Optional, Tuple, Union

from Crypto.Hash import SHA256
from Crypto.Util.number import inverse

from curves import Curve
from ecc import CurvePoint, PointAtInfinity
from errors import VerifySignatureError

logger = logging.getLogger(__name__)

Signature = Tuple[int, int]


def hash_message(message: Union[str, bytes], n: int) -> int:
    """SHA-256 digest truncated to the leftmost n.bit_length() bits, reduced mod n."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    message_digest = SHA256.new(data=message)
    e = int.from_bytes(message_digest.digest(), "big")
    e >>= max(0, message_digest.digest_size * 8 - n.bit_length())
    return e % n


def generate_scalar(n: int) -> int:
    """Uniform random scalar in [1, n - 1]."""
    return secrets.randbelow(n - 1) + 1


def generate_keypair(curve: Curve) -> Tuple[int, CurvePoint]:
    d = generate_scalar(curve.order)
    return d, d * curve.generator


def sign(message: Union[str, bytes], d: int, curve: Curve, k: Optional[int] = None) -> Signature:
    """
    Sign message with private key d.

    :param message: message to sign
    :param d: private key in [1, n - 1]
    :param curve: curve providing the generator and its prime order n
    :param k: ephemeral scalar; drawn at random when omitted
    :return: the signature (r, s)
    """
    n = curve.order
    if not curve.has_prime_order:
        raise ValueError(f"ECDSA needs a generator of prime order, {curve.name} has order {n}")
    e = hash_message(message, n)
    fixed_k = k is not None

    while True:
        if not fixed_k:
            k = generate_scalar(n)
        R = k * curve.generator
        r = 0 if isinstance(R, PointAtInfinity) else int(R.x.value) % n
        s = ((e + r * d) * inverse(k, n)) % n if r != 0 else 0
        if r != 0 and s != 0:
            return r, s
        if fixed_k:
            raise ValueError(f"Invalid ephemeral scalar {k}: r={r}, s={s}")
        logger.debug("Degenerate signature for k=%d, drawing a new scalar", k)


def verify(message: Union[str, bytes], signature: Signature, public_key: CurvePoint, curve: Curve) -> bool:
    try:
        verify_ecdsa_signature(message, signature, public_key, curve)
    except VerifySignatureError as e:
        logger.debug(e.message)
        return False
    return True


def verify_ecdsa_signature(
    message: Union[str, bytes], signature: Signature, public_key: CurvePoint, curve: Curve
) -> None:
    n = curve.order
    r, s = signature
    if not (1 <= r < n and 1 <= s < n):
        raise VerifySignatureError("Signature out of bound n. Abort.")
    if isinstance(public_key, PointAtInfinity):
        raise VerifySignatureError("Public key is the point at infinity. Abort.")
    if not curve.generator.same_curve(public_key):
        raise VerifySignatureError(f"Public key is not on {curve.name}. Abort.")
    e = hash_message(message, n)
    w = inverse(s, n)
    u1 = (e * w) % n
    u2 = (r * w) % n
    V = u1 * curve.generator + u2 * public_key
    if isinstance(V, PointAtInfinity):
        raise VerifySignatureError("Point at infinity. Abort.")
    if int(V.x.value) % n != r:
        raise VerifySignatureError("Signature mismatch. Abort.")
