"""Test playlist configuration values."""

import pytest

from xspfgen.config import MediaProfile, OutputPlacement, PlaylistConfig, SortPolicy


def test_default_config() -> None:
    config = PlaylistConfig()

    assert config.accepted_extensions == frozenset({".mp4", ".mkv", ".webm"})
    assert config.image_extensions == frozenset({".png", ".jpg", ".jpeg"})
    assert config.description_extension == ".description"
    assert config.sort_policy is SortPolicy.NAME
    assert config.output_placement is OutputPlacement.PARENT
    assert config.track_start == 1
    assert config.indent == "\t"


def test_media_profile_adds_audio() -> None:
    assert MediaProfile.VIDEO.extensions == frozenset({".mp4", ".mkv", ".webm"})
    assert MediaProfile.MEDIA.extensions == frozenset(
        {".mp4", ".mkv", ".webm", ".mp3", ".m4a", ".wav"}
    )


def test_for_profile_accepts_names_and_overrides() -> None:
    config = PlaylistConfig.for_profile(" Media ", track_start=0)

    assert config.accepts(".mp3")
    assert not config.accepts(".MP3")
    assert config.track_start == 0


def test_from_user_input_rejects_unknown_profile() -> None:
    with pytest.raises(ValueError, match="Valid options: video, media"):
        _ = MediaProfile.from_user_input("podcast")


def test_extension_collections_are_frozen() -> None:
    config = PlaylistConfig(image_extensions={".jpg"})  # type: ignore[arg-type]

    assert config.image_extensions == frozenset({".jpg"})
    assert config.is_image(".jpg")
    assert not config.is_image(".png")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"accepted_extensions": frozenset({"mp4"})},
        {"image_extensions": frozenset({"."})},
        {"description_extension": "description"},
        {"track_start": -1},
    ],
)
def test_invalid_values_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        _ = PlaylistConfig(**kwargs)  # type: ignore[arg-type]


def test_sort_policy_keys() -> None:
    names = ["10", "9", "b", "aa"]

    assert sorted(names, key=SortPolicy.NAME.key) == ["10", "9", "aa", "b"]
    assert sorted(names, key=SortPolicy.LENGTH_THEN_NAME.key) == ["9", "b", "10", "aa"]
