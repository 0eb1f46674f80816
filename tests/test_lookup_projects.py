from label_commands.core.io.load_records import load_records
from label_commands.core.lookup.lookup_projects import projects_for_label, summarize_commands


def test_projects_for_label_unique_in_order():
    records = load_records("examples/commands.json")
    assert projects_for_label(records, "area/alerting") == [
        "https://github.com/orgs/grafana/projects/97"
    ]
    assert projects_for_label(records, "type/bug") == [
        "https://github.com/orgs/grafana/projects/76"
    ]


def test_projects_for_unknown_label():
    assert projects_for_label(load_records("examples/commands.json"), "nope") == []


def test_projects_for_label_skips_malformed_targets():
    records = [
        {"name": "a", "addToProject": {"url": "u2"}},
        {"name": "a", "addToProject": "u1"},
        {"name": "a", "addToProject": {}},
        {"name": "a", "addToProject": {"url": "u1"}},
        "junk",
    ]
    assert projects_for_label(records, "a") == ["u2", "u1"]


def test_summarize_commands():
    summary = summarize_commands(load_records("examples/commands.json"))
    assert summary == {
        "command_count": 5,
        "label_count": 2,
        "project_count": 2,
        "without_project_count": 2,
    }
