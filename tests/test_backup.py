from pathlib import Path

import pytest

from sms_transactions.errors import BackupReadError
from sms_transactions.ingest import SmsRecord, iter_backup_records, load_backup_records
from sms_transactions.pipeline import parse_backup_file
from tests.helpers.messages import backup_xml, millis


def test_reads_records_in_file_order():
    data = backup_xml(
        ("CIB", "first", 1714557600000),
        ("Banque Misr", "تم اضافة مبلغ 500 جنيه", 1714557601000),
    )

    assert load_backup_records(data) == [
        SmsRecord(address="CIB", body="first", date="1714557600000"),
        SmsRecord(address="Banque Misr", body="تم اضافة مبلغ 500 جنيه", date="1714557601000"),
    ]


def test_missing_attributes_become_empty_strings():
    data = b"<smses><sms address='CIB' /><mms address='x' /></smses>"

    assert list(iter_backup_records(data)) == [SmsRecord(address="CIB", body="", date="")]


def test_malformed_xml_is_fatal():
    with pytest.raises(BackupReadError, match="error parsing XML"):
        load_backup_records(b"<smses><sms address='CIB'></smses>")


def test_unexpected_root_is_fatal():
    with pytest.raises(BackupReadError, match="<smses>"):
        load_backup_records(b"<calls><call number='1' /></calls>")


def test_missing_file_is_fatal(tmp_path: Path):
    with pytest.raises(BackupReadError, match="error reading file"):
        load_backup_records(tmp_path / "nope.xml")


def test_parse_backup_file(tmp_path: Path):
    path = tmp_path / "sms.xml"
    path.write_bytes(
        backup_xml(
            ("Banque Misr", "تم اضافة مبلغ 500 جنيه الى حساب رقم ***123", millis(2024, 5, 1)),
            ("Banque Misr", "Your OTP is 1234", millis(2024, 5, 1)),
            ("CIB", "Welcome", "bad"),
        )
    )

    result = parse_backup_file(path)

    assert [r.counterparty for r in result.groups["Banque_Misr"]] == ["Transfer In"]
    assert result.report.received == 3
    assert result.report.emitted == 1
