# tests/test_cli.py
from datetime import datetime, timedelta, timezone

from typer.testing import CliRunner

from bloodpressure.cli import app
from bloodpressure.reading import Reading
from bloodpressure.storage import ReadingStore


runner = CliRunner()

T1 = datetime(2024, 3, 1, 8, 5, tzinfo=timezone.utc)
T2 = T1 + timedelta(hours=12)


def seed(store, *readings):
    for r in readings:
        store.append(r)


def test_record_appends_current_reading(store):
    before = datetime.now(timezone.utc).replace(microsecond=0)
    result = runner.invoke(app, ["record", "--top", "120", "--bottom", "80", "--pulse", "60"])
    assert result.exit_code == 0, result.output

    (reading,) = store.load_all()
    assert (reading.systolic, reading.diastolic, reading.pulse) == (120, 80, 60)
    assert reading.timestamp >= before


def test_record_requires_all_values(store):
    result = runner.invoke(app, ["record", "--top", "120", "--bottom", "80"])
    assert result.exit_code == 2
    assert not store.path.exists()


def test_record_rejects_negative_values(store):
    result = runner.invoke(app, ["record", "--top=-120", "--bottom", "80", "--pulse", "60"])
    assert result.exit_code == 2
    assert not store.path.exists()


def test_record_rejects_values_above_u32(store):
    result = runner.invoke(app, ["record", "--top", "4294967296", "--bottom", "80", "--pulse", "60"])
    assert result.exit_code == 2


def test_record_unwritable_data_dir(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    result = runner.invoke(
        app,
        ["record", "--top", "120", "--bottom", "80", "--pulse", "60", "--data-dir", str(blocker / "sub")],
    )
    assert result.exit_code == 1


def test_report_before_first_record_fails(store):
    result = runner.invoke(app, ["report"])
    assert result.exit_code == 1
    assert "BP:" not in result.stdout


def test_report_malformed_store_fails(store, data_dir):
    data_dir.mkdir(parents=True)
    store.path.write_text("1709280300,120,80,sixty\n", encoding="utf-8")
    result = runner.invoke(app, ["report"])
    assert result.exit_code == 1


def test_report_scenario(store):
    seed(store, Reading(T1, 120, 80, 60), Reading(T2, 130, 85, 65))

    result = runner.invoke(app, ["report", "--limit", "1"])
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("\tBP: 130/85\tPulse: 65")

    result = runner.invoke(app, ["report", "--limit", "10"])
    lines = result.stdout.splitlines()
    assert [line.split("\t", 1)[1] for line in lines] == [
        "BP: 130/85\tPulse: 65",
        "BP: 120/80\tPulse: 60",
    ]


def test_report_line_format(store):
    seed(store, Reading(T1, 120, 80, 60))
    result = runner.invoke(app, ["report"])
    (line,) = result.stdout.splitlines()
    assert line == Reading(T1, 120, 80, 60).format()


def test_report_default_limit_is_ten(store):
    seed(store, *(Reading(T1 + timedelta(minutes=i), 120, 80, 60 + i) for i in range(12)))
    result = runner.invoke(app, ["report"])
    lines = result.stdout.splitlines()
    assert len(lines) == 10
    assert lines[0].endswith("Pulse: 71")


def test_report_limit_from_config(store, tmp_path):
    seed(store, *(Reading(T1 + timedelta(minutes=i), 120, 80, 60 + i) for i in range(5)))
    config = tmp_path / "config.toml"
    config.write_text("[report]\nlimit = 2\n", encoding="utf-8")

    result = runner.invoke(app, ["report", "--config", str(config)])
    assert len(result.stdout.splitlines()) == 2

    result = runner.invoke(app, ["report", "--config", str(config), "--limit", "4"])
    assert len(result.stdout.splitlines()) == 4


def test_show_path_does_not_touch_data(data_dir):
    result = runner.invoke(app, ["show-path"])
    assert result.exit_code == 0
    assert result.stdout.strip() == f"Data Path: {data_dir / 'data.csv'}"
    assert not data_dir.exists()


def test_data_dir_option_overrides_environment(tmp_path):
    other = tmp_path / "other"
    result = runner.invoke(app, ["show-path", "--data-dir", str(other)])
    assert result.stdout.strip() == f"Data Path: {other / 'data.csv'}"


def test_config_filename_used(tmp_path, data_dir):
    config = tmp_path / "config.toml"
    config.write_text('[storage]\nfilename = "bp.csv"\n', encoding="utf-8")

    result = runner.invoke(app, ["record", "-c", str(config), "--top", "120", "--bottom", "80", "--pulse", "60"])
    assert result.exit_code == 0, result.output
    assert len(ReadingStore(data_dir, filename="bp.csv").load_all()) == 1


def test_explicit_missing_config_fails(tmp_path):
    result = runner.invoke(app, ["show-path", "--config", str(tmp_path / "absent.toml")])
    assert result.exit_code == 1


def test_invalid_config_fails(tmp_path):
    config = tmp_path / "config.toml"
    config.write_text("[report]\nlimit = -3\n", encoding="utf-8")
    result = runner.invoke(app, ["report", "--config", str(config)])
    assert result.exit_code == 1


def test_verbose_flag_accepted(data_dir):
    result = runner.invoke(app, ["--verbose", "show-path"])
    assert result.exit_code == 0
    assert f"Data Path: {data_dir / 'data.csv'}" in result.stdout
