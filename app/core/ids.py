import uuid

def gen_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


def gen_booking_token() -> str:
    # Not stored anywhere; only echoed back to the client.
    return gen_id("bk")
