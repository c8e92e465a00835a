"""Tests for project grouping."""

from trackline.service.grouping import (
    DEFAULT_PROJECT_NAME,
    group_tasks,
    resolve_project_name,
)


class NamedOption:
    def __init__(self, name):
        self.name = name


class TestResolveProjectName:
    def test_plain_string(self, make_task):
        assert resolve_project_name(make_task(properties={"Project": "Alpha"})) == "Alpha"

    def test_lowercase_key(self, make_task):
        assert resolve_project_name(make_task(properties={"project": "Alpha"})) == "Alpha"

    def test_select_mapping(self, make_task):
        task = make_task(properties={"Project": {"name": "Alpha"}})
        assert resolve_project_name(task) == "Alpha"

    def test_select_object_with_name_attribute(self, make_task):
        task = make_task(properties={"Project": NamedOption("Gamma")})
        assert resolve_project_name(task) == "Gamma"

    def test_list_takes_first_element(self, make_task):
        task = make_task(properties={"Project": [{"name": "Alpha"}, {"name": "Beta"}]})
        assert resolve_project_name(task) == "Alpha"

    def test_list_of_strings(self, make_task):
        task = make_task(properties={"project": ["Delta", "Epsilon"]})
        assert resolve_project_name(task) == "Delta"

    def test_string_wins_over_select(self, make_task):
        task = make_task(properties={"Project": {"name": "Select"}, "project": "Plain"})
        assert resolve_project_name(task) == "Plain"

    def test_empty_list_falls_back_to_section(self, make_task):
        task = make_task(properties={"Project": []}, section="Beta")
        assert resolve_project_name(task) == "Beta"

    def test_unusable_values_fall_back_to_section(self, make_task):
        task = make_task(properties={"Project": 42, "project": {"id": 1}}, section="Beta")
        assert resolve_project_name(task) == "Beta"

    def test_section_fallback(self, make_task):
        assert resolve_project_name(make_task(section="Beta")) == "Beta"

    def test_final_default(self, make_task):
        assert resolve_project_name(make_task()) == DEFAULT_PROJECT_NAME
        assert resolve_project_name(make_task(section="")) == "General Tasks"

    def test_missing_properties_key(self, make_task):
        task = make_task(section="Beta")
        del task["properties"]
        assert resolve_project_name(task) == "Beta"


class TestGroupTasks:
    def test_fallback_chain_and_first_seen_order(self, make_task):
        alpha = make_task(properties={"Project": {"name": "Alpha"}})
        beta = make_task(section="Beta")
        general = make_task()

        groups = group_tasks([alpha, beta, general])

        assert [g["name"] for g in groups] == ["Alpha", "Beta", "General Tasks"]
        assert groups[0]["tasks"] == [alpha]
        assert groups[1]["tasks"] == [beta]
        assert groups[2]["tasks"] == [general]

    def test_tasks_keep_input_order_within_group(self, make_task):
        first = make_task(section="Beta", title="first")
        other = make_task(section="Alpha")
        second = make_task(properties={"Project": "Beta"}, title="second")

        groups = group_tasks([first, other, second])

        assert [g["name"] for g in groups] == ["Beta", "Alpha"]
        assert [t["title"] for t in groups[0]["tasks"]] == ["first", "second"]

    def test_empty_input(self):
        assert group_tasks([]) == []
