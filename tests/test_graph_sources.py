import sys
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from graphai_visualizer.graph.schema import DataSource
from graphai_visualizer.graph.sources import inputs_to_data_sources, parse_node_name


class ParseNodeNameTests(unittest.TestCase):
    def test_plain_reference(self):
        self.assertEqual(parse_node_name(":input"), DataSource(node_id="input"))

    def test_sub_field_reference(self):
        source = parse_node_name(":llm.choices.$0.message.content")
        self.assertEqual(source.node_id, "llm")
        self.assertEqual(source.prop_ids, ["choices", "$0", "message", "content"])

    def test_method_call_suffixes_stay_whole(self):
        source = parse_node_name(":graphGenerator.text.codeBlock().jsonParse()")
        self.assertEqual(source.node_id, "graphGenerator")
        self.assertEqual(source.prop_ids, ["text", "codeBlock()", "jsonParse()"])

    def test_literals_are_values(self):
        for literal in ("hello", "https://example.com/a:b", 42, None, True, "row :row"):
            source = parse_node_name(literal)
            self.assertIsNone(source.node_id)
            self.assertEqual(source.value, literal)


class InputsToDataSourcesTests(unittest.TestCase):
    def test_mapping_values_in_order(self):
        sources = inputs_to_data_sources({"array": ":result", "item": ":llm.text"})
        self.assertEqual([s.node_id for s in sources], ["result", "llm"])
        self.assertEqual(sources[1].prop_ids, ["text"])

    def test_list_with_nested_literals(self):
        sources = inputs_to_data_sources([{}, ":userInput", {"role": "user"}])
        self.assertEqual([s.node_id for s in sources if s.node_id], ["userInput"])

    def test_template_references_inside_strings(self):
        sources = inputs_to_data_sources("Say ${:greeting.text} to ${:name}!")
        self.assertEqual([(s.node_id, s.prop_ids) for s in sources], [("greeting", ["text"]), ("name", None)])

    def test_deeply_nested_structures(self):
        inputs = {"messages": [{"role": "system", "content": "docs: ${:document}"}, {"content": ":sample"}]}
        self.assertEqual([s.node_id for s in inputs_to_data_sources(inputs) if s.node_id], ["document", "sample"])

    def test_single_literal_is_a_singleton(self):
        sources = inputs_to_data_sources(3)
        self.assertEqual(len(sources), 1)
        self.assertEqual(sources[0].value, 3)


if __name__ == "__main__":
    unittest.main()
