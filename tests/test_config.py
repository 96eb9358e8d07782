from pathlib import Path

import pydantic
import pytest

from permkit.bootup import create_logger, create_manager_config
from permkit.models.constants import CODEC_CONSTANTS, load_constants


def test_packaged_defaults() -> None:
    config = create_manager_config()
    assert config.strict_special_attributes is False
    assert config.verify_special_attributes is True
    assert config.log_filepath is None
    assert config.log_batch_size >= 1


def test_nested_tables_are_flattened(tmp_path: Path) -> None:
    config_file = tmp_path / "manager_config.toml"
    config_file.write_text(
        "[special_attributes]\nstrict_special_attributes = true\n\n"
        "[logging]\nlog_filepath = \"logs/activity.jsonl\"\nlog_batch_size = 4\nlog_min_severity = 3\n",
        encoding="utf-8",
    )
    config = create_manager_config(config_file)
    assert config.strict_special_attributes is True
    assert config.log_filepath == tmp_path / "logs" / "activity.jsonl"

    logger = create_logger(config)
    assert logger.batch_size == 4
    assert logger.min_severity == 3


def test_invalid_config_is_rejected(tmp_path: Path) -> None:
    config_file = tmp_path / "manager_config.toml"
    config_file.write_text("[logging]\nlog_batch_size = 0\n", encoding="utf-8")
    with pytest.raises(pydantic.ValidationError):
        create_manager_config(config_file)


def test_codec_constants() -> None:
    assert CODEC_CONSTANTS.numeric.chmod_range == (0, 7777)
    assert CODEC_CONSTANTS.extended.length == 9
    assert CODEC_CONSTANTS.symbolic.principals == "ugoa"


def test_codec_constants_validate_column_letters(tmp_path: Path) -> None:
    constants_file = tmp_path / "constants.toml"
    constants_file.write_text(
        "[codecs.numeric]\nchmod_range = [0, 7777]\numask_range = [0, 777]\nmax_digit = 7\n\n"
        "[codecs.extended]\nlength = 9\nunset_character = \"-\"\ncolumn_letters = \"rwx\"\n\n"
        "[codecs.symbolic]\nprincipals = \"ugoa\"\npermissions = \"rwx\"\noperators = \"+-\"\nclause_separator = \",\"\n",
        encoding="utf-8",
    )
    with pytest.raises(pydantic.ValidationError):
        load_constants(constants_file)
