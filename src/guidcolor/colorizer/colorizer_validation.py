import uuid
from guidcolor.colorizer.colorizer_config import IDENTIFIER_SIZE, SEED_MIN, SEED_MAX

IdentifierLike = uuid.UUID | str | bytes


def coerce_identifier(identifier: IdentifierLike) -> uuid.UUID:
    """
    Turn a supported identifier representation into a uuid.UUID.

    Parameters
    ----------
    identifier : uuid.UUID | str | bytes
        A UUID, any string uuid.UUID accepts (e.g. "{...}", hyphenated or bare hex),
        or exactly 16 bytes in the mixed-endian GUID layout (UUID.bytes_le).

    Returns
    -------
    uuid.UUID
        The identifier as a UUID.

    Raises
    ------
    TypeError
        If identifier is of an unsupported type.
    ValueError
        If a string cannot be parsed or the bytes are not exactly 16 long.
    """

    if isinstance(identifier, uuid.UUID):
        return identifier
    if isinstance(identifier, str):
        try:
            return uuid.UUID(identifier)
        except ValueError as e:
            raise ValueError(f"Identifier string {identifier!r} is not a valid UUID.") from e
    if isinstance(identifier, (bytes, bytearray, memoryview)):
        raw: bytes = bytes(identifier)
        if len(raw) != IDENTIFIER_SIZE:
            raise ValueError(f"Identifier bytes must be exactly {IDENTIFIER_SIZE} long.")
        return uuid.UUID(bytes_le=raw)
    raise TypeError("Identifier must be a uuid.UUID, a str or 16 bytes.")


def validate_seed(seed: int) -> None:
    # bool is an int subclass but never a meaningful seed
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise TypeError("Seed must be an integer.")
    if seed < SEED_MIN or seed > SEED_MAX:
        raise ValueError("Seed must fit in a signed 64-bit integer.")
