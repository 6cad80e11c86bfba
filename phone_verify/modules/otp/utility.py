import secrets

OTP_MIN = 100000
OTP_MAX = 999999


def generate_otp() -> str:
    """Uniformly random 6-digit code in [100000, 999999]."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))
