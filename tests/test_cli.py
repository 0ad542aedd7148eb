from pathlib import Path

from typer.testing import CliRunner

from sms_transactions.cli import app
from tests.helpers.messages import backup_xml, millis

runner = CliRunner()


def _backup(tmp_path: Path) -> Path:
    path = tmp_path / "sms.xml"
    path.write_bytes(
        backup_xml(
            (
                "CIB",
                "تم خصم EGP 150.00 من بطاقة الخصم المنتهية بـ7759 عند CARREFOUR في 2024-05-01",
                millis(2024, 5, 1),
            ),
            (
                "CIB",
                "Your credit card ending with 4321 was charged for EGP 60.00 at "
                "UBER TRIP on 05/03 at 14:02.",
                millis(2024, 4, 1),
            ),
            ("Banque Misr", "تم اضافة مبلغ 500 جنيه الى حساب رقم ***123", millis(2024, 5, 2)),
        )
    )
    return path


def test_parse_writes_csv_files(tmp_path: Path):
    out = tmp_path / "out"
    result = runner.invoke(app, ["parse", str(_backup(tmp_path)), "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert f"Created {out / 'CIB_Current_Debit.csv'} with 1 transactions." in result.output
    assert f"Created {out / 'CIB_Credit_Card_4321.csv'} with 1 transactions." in result.output
    assert f"Created {out / 'Banque_Misr.csv'} with 1 transactions." in result.output
    assert sorted(p.name for p in out.iterdir()) == [
        "Banque_Misr.csv",
        "CIB_Credit_Card_4321.csv",
        "CIB_Current_Debit.csv",
    ]


def test_parse_filters_and_report(tmp_path: Path):
    out = tmp_path / "out"
    result = runner.invoke(
        app,
        [
            "parse",
            str(_backup(tmp_path)),
            "-o",
            str(out),
            "-s",
            "CIB",
            "-f",
            "2024-04-15",
            "--report",
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out.iterdir()) == ["CIB_Current_Debit.csv"]
    assert "received\t3" in result.output
    assert "sender_filter\t1" in result.output
    assert "before_start\t1" in result.output
    assert "emitted\t1" in result.output


def test_output_defaults_to_working_directory(tmp_path: Path):
    # conftest runs each test from tmp_path.
    result = runner.invoke(app, ["parse", str(_backup(tmp_path))])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "Banque_Misr.csv").exists()


def test_invalid_start_date_is_fatal(tmp_path: Path):
    result = runner.invoke(app, ["parse", str(_backup(tmp_path)), "--from", "05/01/2024"])

    assert result.exit_code == 1
    assert "Error: invalid date format" in result.output


def test_unreadable_backup_is_fatal(tmp_path: Path):
    bad = tmp_path / "bad.xml"
    bad.write_text("<smses><sms></smses>", encoding="utf-8")

    result = runner.invoke(app, ["parse", str(bad), "-o", str(tmp_path / "out")])

    assert result.exit_code == 1
    assert "Error: error parsing XML" in result.output
    assert not (tmp_path / "out").exists()
