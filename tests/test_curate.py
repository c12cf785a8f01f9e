"""Tests for the catalog curation helpers."""

import argparse
import json

import pytest

from autorotate.scripts.curate import apply_defaults, build_parser, load_images, parse_flag
from autorotate.services.errors import NotAdministratorError
from autorotate.services.rotation import RotationSettings
from tests.conftest import ADMIN, ALICE, IMAGES


def test_load_images_appends_in_file_order(gallery, tmp_path) -> None:
    path = tmp_path / "images.json"
    path.write_text(json.dumps(IMAGES[:3]), encoding="utf-8")

    assert load_images(gallery, ADMIN, path) == [0, 1, 2]
    assert gallery.image_at_index(2).reference == IMAGES[2]["reference"]


def test_load_images_requires_a_list(gallery, tmp_path) -> None:
    path = tmp_path / "images.json"
    path.write_text(json.dumps(IMAGES[0]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_images(gallery, ADMIN, path)


def test_load_images_checks_administrator(gallery, tmp_path) -> None:
    path = tmp_path / "images.json"
    path.write_text(json.dumps(IMAGES), encoding="utf-8")
    with pytest.raises(NotAdministratorError):
        load_images(gallery, ALICE, path)
    assert gallery.num_images() == 0


def test_apply_defaults_only_touches_supplied_fields(gallery) -> None:
    gallery.set_global_defaults(ADMIN, 10, 3, False)
    apply_defaults(gallery, ADMIN, use_most_recent=True)
    assert gallery.global_defaults() == RotationSettings(10, 3, True, True)
    apply_defaults(gallery, ADMIN, tick_duration=2, index_offset=0)
    assert gallery.global_defaults() == RotationSettings(2, 0, True, True)


@pytest.mark.parametrize(("value", "expected"), [("true", True), ("Yes", True), ("on", True), ("0", False), ("off", False)])
def test_use_most_recent_flag_accepts_known_spellings(value, expected) -> None:
    args = build_parser().parse_args(["set-defaults", "--use-most-recent", value])
    assert args.use_most_recent is expected


@pytest.mark.parametrize("value", ["ture", "maybe", ""])
def test_use_most_recent_flag_rejects_unknown_values(value) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_flag(value)
    with pytest.raises(SystemExit):
        build_parser().parse_args(["set-defaults", "--use-most-recent", value])
