import pytest

from novelpoly.bench import main, run_roundtrip
from novelpoly.errors import PayloadSizeIsZero, WantedShardCountTooLow


def test_run_roundtrip_default_sizes():
    assert run_roundtrip(1337, 123) >= 0.0


def test_run_roundtrip_many_validators():
    assert run_roundtrip(4096, 2000) >= 0.0


def test_run_roundtrip_empty_payload():
    with pytest.raises(PayloadSizeIsZero):
        run_roundtrip(0, 10)


def test_run_roundtrip_too_few_shards():
    with pytest.raises(WantedShardCountTooLow):
        run_roundtrip(100, 1)


def test_main_success(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "1337 bytes" in out
    assert "123 shards" in out
    assert "succeeded" in out


def test_main_custom_arguments(capsys):
    assert main(["--payload-size", "64", "--shards", "8"]) == 0
    out = capsys.readouterr().out
    assert "64 bytes over 8 shards" in out


def test_main_reports_empty_payload(capsys):
    assert main(["--payload-size", "0"]) == 1
    err = capsys.readouterr().err
    assert "Size of the payload is zero" in err


def test_main_reports_too_few_shards(capsys):
    assert main(["--shards", "1"]) == 1
    err = capsys.readouterr().err
    assert "at least 2" in err