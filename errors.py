class EllipticCurveError(Exception):
    """Base class for every error raised by the field and curve arithmetic."""


class OutOfRangeError(EllipticCurveError, ValueError):
    def __init__(self, value, modulus):
        self.value = value
        self.modulus = modulus
        self.message = f"Num {value} not in field range 0 to {modulus - 1}"
        super().__init__(self.message)


class ModulusMismatchError(EllipticCurveError, TypeError):
    def __init__(self, left, right):
        self.message = f"Cannot operate on two numbers in different Fields ({left} and {right})."
        super().__init__(self.message)


class DivisionByZeroError(EllipticCurveError, ZeroDivisionError):
    def __init__(self, message):
        self.message = f"Division by zero. {message}"
        super().__init__(self.message)


class PointNotOnCurveError(EllipticCurveError, ValueError):
    def __init__(self, x, y, a, b):
        self.message = f"Point ({x}, {y}) is not on the curve y^2 = x^3 + {a}x + {b}"
        super().__init__(self.message)


class CurveMismatchError(EllipticCurveError, TypeError):
    def __init__(self, left, right):
        self.message = f"Points are not on the same curve: {left} and {right}"
        super().__init__(self.message)


class VerifySignatureError(EllipticCurveError):
    def __init__(self, message):
        self.message = f"Signature verification failed. {message}"
        super().__init__(self.message)
