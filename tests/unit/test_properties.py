"""Property-based tests for URL generation, configuration and path handling."""

import asyncio
from unittest.mock import MagicMock

from hypothesis import HealthCheck, given, settings, strategies as st

from gstore.core.config import DEFAULT_MAX_AGE, GStoreConfig
from gstore.domain.models import Asset, ReadOptions
from gstore.infrastructure.storage.gcs_storage import GStore
from tests.conftest import ChunkedStream, FixedNaming

bucket_names = st.text(alphabet="0123456789abcdef", min_size=3, max_size=20)

domains = st.builds(
    lambda name, tld: name + tld,
    st.text(alphabet="0123456789abcdef", min_size=3, max_size=15),
    st.sampled_from([".com", ".io", ".net", ".org"]),
)

max_ages = st.one_of(
    st.integers(min_value=0, max_value=31536000),
    st.sampled_from(["3600", "86400", "2678400"]),
)

file_names = st.builds(
    lambda name, ext: name + ext,
    st.text(alphabet="0123456789abcdef", min_size=4, max_size=12),
    st.sampled_from([".jpg", ".png", ".gif", ".webp"]),
)

path_segments = st.lists(
    st.text(alphabet="0123456789abcdef", min_size=2, max_size=8), min_size=1, max_size=3
)

fixture_safe = settings(
    max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture]
)


def _store(config: dict | GStoreConfig) -> GStore:
    client = MagicMock()
    blob = client.bucket.return_value.blob.return_value
    blob.exists.return_value = False
    return GStore(config, client=client, naming=FixedNaming())


@fixture_safe
@given(bucket=bucket_names, insecure=st.booleans(), domain=st.none() | domains)
def test_base_url_shape(bucket: str, insecure: bool, domain: str | None) -> None:
    config: dict = {"bucket": bucket, "insecure": insecure}
    if domain is not None:
        config["assetDomain"] = domain
    base_url = _store(config).get_base_url()

    assert base_url.startswith("http://" if insecure else "https://")
    assert base_url.endswith("/") and not base_url.endswith("//")
    expected_domain = domain if domain is not None else f"{bucket}.storage.googleapis.com"
    assert expected_domain in base_url


@fixture_safe
@given(
    bucket=bucket_names,
    domain=st.none() | domains,
    insecure=st.none() | st.booleans(),
    max_age=st.none() | max_ages,
    key=st.none() | st.text(),
    project_id=st.none() | st.text(),
)
def test_supplied_config_preserved(
    bucket: str,
    domain: str | None,
    insecure: bool | None,
    max_age: int | str | None,
    key: str | None,
    project_id: str | None,
) -> None:
    supplied = {
        "assetDomain": domain,
        "insecure": insecure,
        "maxAge": max_age,
        "key": key,
        "projectId": project_id,
    }
    config = {"bucket": bucket, **{k: v for k, v in supplied.items() if v is not None}}
    stored = _store(config).get_config()

    assert stored.bucket == bucket
    assert stored.asset_domain == domain
    assert stored.insecure == (insecure if insecure is not None else False)
    assert stored.max_age == (max_age if max_age is not None else DEFAULT_MAX_AGE)
    assert stored.key == key
    assert stored.project_id == project_id
    assert stored.uniform_bucket_level_access is False


@fixture_safe
@given(bucket=bucket_names, insecure=st.booleans(), domain=st.none() | domains, name=file_names)
def test_save_url_matches_protocol(
    bucket: str, insecure: bool, domain: str | None, name: str
) -> None:
    config = GStoreConfig(bucket=bucket, insecure=insecure, assetDomain=domain)
    store = _store(config)
    url = asyncio.run(store.save(Asset(path=f"/tmp/{name}", name=name, type="image/jpeg")))

    assert url.startswith("http://" if insecure else "https://")
    assert url == f"{store.get_base_url()}2024/01/{name}"


@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(bucket=bucket_names, name=file_names, target_dir=st.none() | path_segments)
def test_exists_is_strict_bool(
    bucket: str, name: str, target_dir: list[str] | None
) -> None:
    store = _store({"bucket": bucket})
    joined = "\\".join(target_dir) if target_dir else None
    result = asyncio.run(store.exists(name, joined))

    assert result is True or result is False
    called_path = store._bucket.blob.call_args.args[0]
    assert "\\" not in called_path
    if target_dir:
        assert called_path == "/".join([*target_dir, name])
    else:
        assert called_path == name


@settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(bucket=bucket_names, name=file_names, target_dir=st.none() | path_segments)
def test_delete_always_true(
    bucket: str, name: str, target_dir: list[str] | None
) -> None:
    store = _store({"bucket": bucket})
    joined = "\\".join(target_dir) if target_dir else None
    result = asyncio.run(store.delete(name, joined))

    assert result is True
    called_path = store._bucket.blob.call_args.args[0]
    assert "\\" not in called_path
    if target_dir:
        assert called_path == "/".join([*target_dir, name])
    else:
        assert called_path == name


# An empty chunk marks end of stream, so generated chunks are non-empty.
@fixture_safe
@given(chunks=st.lists(st.binary(min_size=1, max_size=64), max_size=10), name=file_names)
def test_read_concatenates_chunks(chunks: list[bytes], name: str) -> None:
    store = _store({"bucket": "test-bucket"})
    stream = ChunkedStream(chunks)
    store._bucket.blob.return_value.open.return_value = stream

    result = asyncio.run(store.read(ReadOptions(path=f"2024/01/{name}")))

    assert result == b"".join(chunks)
    assert stream.closed
