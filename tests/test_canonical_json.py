import hashlib
import json

from sstfixtures._internal.canonical_json import canonical_dumps, canonical_sha256
from sstfixtures.kernel.matrix import Combination
from sstfixtures.kernel.naming import content_digest, iter_records
from sstfixtures.kernel.params import ChecksumType, CompressionType


def test_canonical_dumps_sorts_keys_and_compacts():
    assert canonical_dumps({"b": 2, "a": [3, 1]}) == '{"a":[3,1],"b":2}'


def test_canonical_dumps_keeps_non_ascii():
    assert canonical_dumps({"k": "é"}) == '{"k":"é"}'


def test_canonical_sha256_ignores_key_order():
    assert canonical_sha256({"a": 1, "b": 2}) == canonical_sha256({"b": 2, "a": 1})
    assert canonical_sha256([1, 2]) != canonical_sha256([2, 1])


def test_content_digest_matches_canonical_records():
    combo = Combination(5, ChecksumType.CRC32C, CompressionType.SNAPPY)
    records = [[k.decode("utf-8"), v.decode("utf-8")] for k, v in iter_records(combo)]
    canonical_str = json.dumps(records, sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    expected = hashlib.sha256(canonical_str.encode("utf-8")).hexdigest()
    assert content_digest(combo) == expected
