import argparse
import logging

from curves import get_curve, supported_curves
from signing import generate_keypair, sign, verify


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Elliptic curve arithmetic and ECDSA demo")
    parser.add_argument("-c", "--curve", default="secp256k1", choices=supported_curves(), help="Curve to use (default: secp256k1)")
    parser.add_argument("-m", "--message", default="Hello elliptic curves", help="Message to sign")
    parser.add_argument("-d", "--private-key", type=int, default=None, help="Private key; random when omitted")
    parser.add_argument("-k", "--multiples", type=int, default=5, help="Number of multiples of the generator to print (default: 5)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.multiples < 0:
        parser.error("Number of multiples cannot be negative.")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    curve = get_curve(args.curve)
    G = curve.generator
    n = curve.order

    print(f"=== {curve.name} ===")
    print(curve)
    print(f"Generator (G): {G}")
    print(f"Order of G (n): {n}\n")

    print("Scalar multiplication:")
    for k in range(1, args.multiples + 1):
        print(f"{k} * G = {k * G}")
    print()

    if not curve.has_prime_order:
        print(f"Order {n} is not prime, skipping ECDSA.")
        return 0

    # Generate keypair
    if args.private_key is None:
        d, P = generate_keypair(curve)
    else:
        if not 1 <= args.private_key < n:
            raise SystemExit(f"Private key must be in [1, {n - 1}]")
        d = args.private_key
        P = d * G
    print(f"Private key (d): {d}")
    print(f"Public key (P): {P}\n")

    # Sign a message
    print(f"Message: {args.message}")
    sig = sign(args.message, d, curve)
    print(f"Signature: {sig}\n")

    # Verify signature
    valid = verify(args.message, sig, P, curve)
    print(f"Signature valid? {valid}")
    return 0 if valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
