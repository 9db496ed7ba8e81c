import pytest

from salary_timer.intake import acceptedExtensions, declaredMediaType, intakeFile
from salary_timer.intake_dummy import IntakeDummy
from salary_timer.intake_interface import IntakeInterface
from salary_timer.shared import PayRecord, UnsupportedFileType


class CountingIntake(IntakeInterface):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def extract(self, path: str) -> PayRecord:
        self.calls.append(path)
        return IntakeDummy().extract(path)


def test_declared_media_type():
    assert declaredMediaType("payslip.pdf") == "application/pdf"
    assert declaredMediaType("/tmp/PAYSLIP.PDF") == "application/pdf"
    assert declaredMediaType("notes.txt") == "text/plain"
    assert declaredMediaType("no_extension") is None


def test_accepted_extensions_include_pdf():
    assert ".pdf" in acceptedExtensions()


def test_dummy_returns_placeholder_figures(tmp_path):
    record = IntakeDummy().extract(str(tmp_path / "march.pdf"))
    assert record == PayRecord(
        gross_monthly=2500, net_monthly=1850, working_hours=160,
        source_name="march.pdf",
    )


def test_dummy_never_reads_the_file():
    # The path does not exist.
    record = IntakeDummy(net_monthly=1000, working_hours=100).extract("/nowhere/x.pdf")
    assert record.net_monthly == 1000
    assert record.working_hours == 100


def test_intake_file_accepts_pdf():
    intake = CountingIntake()
    record = intakeFile(intake, "dir/payslip.pdf")
    assert record.source_name == "payslip.pdf"
    assert intake.calls == ["dir/payslip.pdf"]


@pytest.mark.parametrize("path", ["notes.txt", "scan.png", "payslip", "payslip.pdf.zip"])
def test_intake_file_rejects_other_types(path):
    intake = CountingIntake()
    with pytest.raises(UnsupportedFileType) as info:
        intakeFile(intake, path)
    assert info.value.path == path
    assert intake.calls == []
