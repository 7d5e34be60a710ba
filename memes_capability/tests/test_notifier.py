"""Tests for StatusReporter."""

from memes_capability import messages
from memes_capability.host import NotifierSeverity, NullNotifier
from memes_capability.notifier import StatusReporter


def test_defaults_to_null_notifier():
    reporter = StatusReporter()
    assert isinstance(reporter.notifier, NullNotifier)
    reporter.initializing()
    reporter.ready("0.2.2", 1, True, (0, 2, 2))
    reporter.dispose()


def test_initializing(notifier):
    StatusReporter(notifier).initializing()
    assert notifier.updates == [(NotifierSeverity.INITIALIZING, messages.INITIALIZING)]


def test_sync_failed_hints(notifier):
    reporter = StatusReporter(notifier)

    reporter.backend_sync_failed(not_found=True)
    reporter.backend_sync_failed(not_found=False)

    assert notifier.updates == [
        (NotifierSeverity.DANGER, f"{messages.SYNC_FAILED}\n{messages.SYNC_FAILED_NOT_FOUND_HINT}"),
        (NotifierSeverity.DANGER, f"{messages.SYNC_FAILED}\n{messages.SYNC_FAILED_HINT}"),
    ]


def test_ready_success(notifier):
    StatusReporter(notifier).ready("0.2.3", 12, True, (0, 2, 2))
    assert notifier.last == (
        NotifierSeverity.SUCCESS,
        "Plugin initialized, backend version 0.2.3, loaded 12 memes.",
    )


def test_ready_warning_keeps_summary(notifier):
    StatusReporter(notifier).ready("0.2.0", 5, False, (0, 2, 2))

    severity, content = notifier.last
    warning, summary = content.split("\n")
    assert severity == NotifierSeverity.WARNING
    assert "0.2.2" in warning
    assert summary == messages.READY.format(version="0.2.0", count=5)


def test_dispose(notifier):
    StatusReporter(notifier).dispose()
    assert notifier.disposed


class BrokenNotifier:
    def update(self, severity, content):
        raise RuntimeError("notifier backend down")

    def dispose(self):
        raise RuntimeError("already gone")


def test_raising_notifier_is_logged_not_raised(mock_logger):
    reporter = StatusReporter(BrokenNotifier(), logger=mock_logger)

    reporter.initializing()
    reporter.backend_sync_failed(not_found=True)
    reporter.ready("0.2.2", 1, True, (0, 2, 2))
    reporter.dispose()

    failures = [c for c in mock_logger.warning.call_args_list if c.args[0] == "notifier_update_failed"]
    assert [c.kwargs["severity"] for c in failures] == ["initializing", "danger", "success"]
    mock_logger.warning.assert_any_call("notifier_dispose_failed", error="already gone")
