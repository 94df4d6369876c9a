"""
Tests for plain text output.
"""

from __future__ import annotations

from io import StringIO

from sentire.formatters import TextFormatter
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.models.organization import Organization, OrganizationStats
from sentire.models.project import Project


class TestTextSingleRecords:
    """Tests for single-record views."""

    def test_event(self, buffer: StringIO, event: Event) -> None:
        """Event view lists fields and the first three entry types."""
        TextFormatter(buffer).format_event(event)

        out = buffer.getvalue()
        assert out.startswith("Event #1001\n")
        assert "Event ID: 9fac2ceed9344f2bbfdd1fdacb0ed9b1\n" in out
        assert "Date Created: 2024-03-05 14:30:00\n" in out
        assert "Size: 2048 bytes\n" in out
        assert "Group ID: 555\n" in out
        assert "Environment: production\n" in out
        assert "  1. Type: exception\n" in out
        assert "  3. Type: request\n" in out
        assert "message" not in out.split("Entries:")[1]

    def test_event_optional_fields_hidden(self, buffer: StringIO) -> None:
        """Unset optional fields are omitted; required ones are always shown."""
        TextFormatter(buffer).format_event(Event(id="1"))

        out = buffer.getvalue()
        assert "Group ID" not in out
        assert "Logger" not in out
        assert "Entries:" not in out
        assert "Date Created: N/A\n" in out

    def test_issue(self, buffer: StringIO, issue: Issue) -> None:
        """Issue view shows status with substatus and flags."""
        TextFormatter(buffer).format_issue(issue)

        out = buffer.getvalue()
        assert out.startswith("Issue #4567890123 (BACKEND-1A)\n")
        assert "Status: unresolved (ongoing)\n" in out
        assert "Priority: high\n" in out
        assert "Project: Backend (backend)\n" in out
        assert "Public: false | Bookmarked: true | Subscribed: false\n" in out
        assert "Permalink: https://acme.sentry.io/issues/4567890123/\n" in out

    def test_project(self, buffer: StringIO, project: Project) -> None:
        """Project view shows organization name and slug."""
        TextFormatter(buffer).format_project(project)

        out = buffer.getvalue()
        assert out.startswith("Project: Backend API Service Production\n")
        assert "Organization: Acme Corp (acme)\n" in out

    def test_stats(self, buffer: StringIO, stats: OrganizationStats) -> None:
        """Stats list the first five projects then a tail."""
        TextFormatter(buffer).format_org_stats(stats)

        out = buffer.getvalue()
        assert out.startswith("Organization Statistics\n======================\n\n")
        assert "Total Sum: 123456\n" in out
        assert "Times Seen: 789\n" in out
        assert "Projects (12):\n" in out
        assert "  5. project-4 (4)\n" in out
        assert "project-5" not in out
        assert "... and 7 more projects\n" in out


class TestTextLists:
    """Tests for list views."""

    def test_events(self, buffer: StringIO, event: Event) -> None:
        """Events are numbered in input order."""
        other = event.model_copy(update={"event_id": "second"})

        TextFormatter(buffer).format_events([event, other])

        out = buffer.getvalue()
        assert out.startswith("Events (2 total):\n\n")
        assert "1. Event #9fac2ceed9344f2bbfdd1fdacb0ed9b1\n" in out
        assert "2. Event #second\n" in out
        assert out.index("1. Event") < out.index("2. Event")
        assert "   Date: 2024-03-05 14:30 | Environment: production\n" in out

    def test_issues(self, buffer: StringIO, issue: Issue) -> None:
        """Issues show short id and summary lines."""
        TextFormatter(buffer).format_issues([issue])

        out = buffer.getvalue()
        assert "1. Issue #BACKEND-1A\n" in out
        assert "   Level: error | Status: unresolved | Count: 128\n" in out
        assert "   Project: backend | Users: 17\n" in out

    def test_projects(self, buffer: StringIO, project: Project) -> None:
        """Projects show name and slug."""
        TextFormatter(buffer).format_projects([project])

        out = buffer.getvalue()
        assert "1. Backend API Service Production (backend)\n" in out
        assert "   Status: active | Created: 2023-06-15\n" in out

    def test_long_title_truncated(self, buffer: StringIO) -> None:
        """List titles are cut at 80 characters."""
        TextFormatter(buffer).format_events([Event(id="1", title="x" * 100)])

        assert f"   Title: {'x' * 77}...\n" in buffer.getvalue()

    def test_empty_typed_lists(self) -> None:
        """Empty typed lists print a not-found notice."""
        for item_type, notice in (
            (Event, "No events found\n"),
            (Issue, "No issues found\n"),
            (Project, "No projects found\n"),
        ):
            buffer = StringIO()
            TextFormatter(buffer).render([], item_type=item_type)
            assert buffer.getvalue() == notice


class TestTextGeneric:
    """Tests for the generic fallback."""

    def test_empty_list(self, buffer: StringIO) -> None:
        """Untyped empty lists print "No data found"."""
        TextFormatter(buffer).render([])

        assert buffer.getvalue() == "No data found\n"

    def test_scalar_list(self, buffer: StringIO) -> None:
        """Plain lists are numbered."""
        TextFormatter(buffer).render(["a", 2, True])

        assert buffer.getvalue() == "Data (3 items):\n\n1. a\n2. 2\n3. true\n\n"

    def test_mixed_records(self, buffer: StringIO, event: Event, issue: Issue) -> None:
        """Mixed record lists are enumerated by index."""
        TextFormatter(buffer).render([event, issue])

        out = buffer.getvalue()
        assert out.startswith("Data (2 items):\n\n1. {")
        assert '"shortId": "BACKEND-1A"' in out

    def test_generic_homogeneous_list(self, buffer: StringIO, issue: Issue) -> None:
        """A homogeneous known list passed to the fallback still renders typed."""
        TextFormatter(buffer).format_generic([issue])

        assert buffer.getvalue().startswith("Issues (1 total):")

    def test_dict(self, buffer: StringIO) -> None:
        """Mappings render as labelled lines under a Data heading."""
        TextFormatter(buffer).render({"status": "ok", "count": 3})

        assert buffer.getvalue() == "Data:\n=====\nstatus: ok\ncount: 3\n\n"

    def test_unknown_record(self, buffer: StringIO) -> None:
        """Records without a typed view describe their own fields."""
        TextFormatter(buffer).render(Organization(id="7", slug="acme", name="Acme Corp"))

        out = buffer.getvalue()
        assert out.startswith("Organization:\n=============\n")
        assert "slug: acme\n" in out
        assert "name: Acme Corp\n" in out

    def test_scalar(self, buffer: StringIO) -> None:
        """Scalars render as a single value."""
        TextFormatter(buffer).render("hello")

        assert buffer.getvalue() == "Value: hello\n\n"

    def test_none(self, buffer: StringIO) -> None:
        """None renders as a nil value."""
        TextFormatter(buffer).render(None)

        assert buffer.getvalue() == "Value: <nil>\n\n"
