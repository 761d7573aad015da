import hashlib
import json


def payload_hash(*parts) -> str:
    """Digest of JSON-serialisable parts, independent of dict key order."""
    s = json.dumps(parts, sort_keys=True, default=str)
    return hashlib.sha256(s.encode()).hexdigest()
