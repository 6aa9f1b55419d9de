"""
Test suite for task, component and configuration classification
"""

import pytest

from dtsx_inventory.parsers.classifiers import (
    classify_task, classify_component, configuration_type_label
)


class TestTaskClassifier:
    """Test cases for the control-flow task type fallback chain"""

    def test_package_payload_wins(self):
        """Execute Package payload takes precedence over everything else"""
        label = classify_task(
            object_name="Run Child",
            contact="Execute Package Task;Microsoft Corporation",
            description="Execute Package Task",
            executable_type="STOCK:SEQUENCE",
            has_package_payload=True
        )
        assert label == "Execute Package Task"

    def test_sequence_container(self):
        label = classify_task("Load Sequence", "", "Sequence Container", "STOCK:SEQUENCE")
        assert label == "Sequence Container"

    @pytest.mark.parametrize("description", ["Data Flow Task", "Script Task", "Foreach Loop Container"])
    def test_known_descriptions_used_verbatim(self, description):
        label = classify_task("Some task", "Performs work;Microsoft Corporation", description, "")
        assert label == description

    def test_microsoft_contact_uses_description(self):
        label = classify_task("Ping", "Microsoft Corporation; Send Mail", "Send Mail Task", "")
        assert label == "Send Mail Task"

    def test_vendor_contact_prefix(self):
        """Vendor components put their display name before the first semicolon"""
        label = classify_task(
            "Merge Customers", "Task Factory Upsert;Pragmatic Works; Task Factory;1",
            "Upserts rows into a table", "PragmaticWorks.TaskFactory.Upsert"
        )
        assert label == "Task Factory Upsert"

    def test_execute_sql_task_from_contact(self):
        label = classify_task(
            "Truncate Staging", "Execute SQL Task; Microsoft Corporation; Microsoft SQL Server 2008",
            "Execute SQL Task", ""
        )
        assert label == "Execute SQL Task"

    def test_empty_contact_falls_back_to_description_then_name(self):
        assert classify_task("Custom", "", "Custom description", "") == "Custom description"
        assert classify_task("Custom", "", "", "") == "Custom"
        assert classify_task("", "", "", "") == "Task"

    def test_contact_prefix_trimmed(self):
        label = classify_task("Merge", "  Task Factory Upsert ;Pragmatic Works", "Upserts rows", "")
        assert label == "Task Factory Upsert"

    def test_blank_contact_prefix_falls_back_to_description(self):
        assert classify_task("Merge", "   ;Pragmatic Works", "Upserts rows", "") == "Upserts rows"


class TestComponentClassifier:
    """Test cases for the data-flow component type fallback chain"""

    def test_contact_info_prefix(self):
        label = classify_component(
            "OLE DB Source;Microsoft Corporation; Microsoft SqlServer v10;7", "OLE DB Source", "Src"
        )
        assert label == "OLE DB Source"

    def test_description_when_contact_empty(self):
        assert classify_component("", "Slowly Changing Dimension", "SCD1") == "Slowly Changing Dimension"

    def test_name_when_contact_and_description_empty(self):
        assert classify_component("", "", "SCD1") == "SCD1"

    def test_contact_without_semicolon(self):
        assert classify_component("Custom Transform", "ignored", "Comp") == "Custom Transform"

    def test_contact_prefix_trimmed(self):
        assert classify_component(" Lookup ;Microsoft Corporation", "", "Comp") == "Lookup"
        assert classify_component("  ;Microsoft Corporation", "Lookup", "Comp") == "Lookup"


class TestConfigurationTypeLabel:
    """Test cases for the configuration type lookup"""

    @pytest.mark.parametrize("value, label", [
        ("0", "Parent package variable"),
        ("2", "Environment variable"),
        ("5", "Indirect XML configuration file"),
        (2, "Environment variable"),
        ("99", "Unknown 99"),
        ("1", "Unknown 1"),
    ])
    def test_known_and_unknown_codes(self, value, label):
        assert configuration_type_label(value) == label

    def test_non_numeric_code(self):
        assert configuration_type_label("") == "Unknown "
        assert configuration_type_label("abc") == "Unknown abc"
