import copy
import gc
import unittest

from dotgraph import Attribute, AttributeNotFound, Graph, Node
from dotgraph.attributes import AttributesAware, GraphAware


class Element(AttributesAware):
    pass


class AttributesAwareTest(unittest.TestCase):
    def setUp(self):
        self.element = Element()

    def test_set_and_get_attribute(self):
        self.assertIs(self.element.set_attribute("color", "red"), self.element)
        attribute = self.element.get_attribute("color")

        self.assertIsInstance(attribute, Attribute)
        self.assertEqual(attribute.get_key(), "color")
        self.assertEqual(attribute.get_value(), "red")

    def test_set_attribute_coerces_values(self):
        self.element.set_attribute("fontsize", 12)
        self.element.set_attribute("penwidth", 1.5)
        self.element.set_attribute("center", True)
        self.element.set_attribute("constraint", False)

        self.assertEqual(self.element.get_attribute("fontsize").get_value(), "12")
        self.assertEqual(self.element.get_attribute("penwidth").get_value(), "1.5")
        self.assertEqual(self.element.get_attribute("center").get_value(), "true")
        self.assertEqual(self.element.get_attribute("constraint").get_value(), "false")

    def test_set_attribute_replaces(self):
        self.element.set_attribute("color", "red")
        first = self.element.get_attribute("color")
        self.element.set_attribute("shape", "box")
        self.element.set_attribute("color", "blue")

        self.assertIsNot(self.element.get_attribute("color"), first)
        self.assertEqual(self.element.get_attribute("color").get_value(), "blue")
        # The replaced attribute keeps its position.
        self.assertEqual([a.get_key() for a in self.element.get_attributes()], ["color", "shape"])

    def test_get_attribute_raises_if_not_found(self):
        with self.assertRaises(AttributeNotFound) as ctx:
            self.element.get_attribute("missing")
        self.assertEqual(ctx.exception.name, "missing")
        self.assertEqual(str(ctx.exception), 'Attribute with name "missing" was not found.')

    def test_attribute_not_found_is_a_key_error(self):
        with self.assertRaises(KeyError):
            self.element.get_attribute("missing")

    def test_has_attribute(self):
        self.assertFalse(self.element.has_attribute("color"))
        self.element.set_attribute("color", "red")
        self.assertTrue(self.element.has_attribute("color"))

    def test_generated_setter(self):
        self.assertIs(self.element.setColor("blue"), self.element)
        self.assertEqual(self.element.get_attribute("color").get_value(), "blue")

    def test_generated_getter(self):
        self.element.setColor("blue")
        attribute = self.element.getColor()

        self.assertIsInstance(attribute, Attribute)
        self.assertEqual(attribute.get_key(), "color")
        self.assertEqual(attribute.get_value(), "blue")

    def test_generated_accessor_lowers_first_letter_only(self):
        self.element.setFontSize(12)
        self.assertTrue(self.element.has_attribute("fontSize"))
        self.assertFalse(self.element.has_attribute("fontsize"))

    def test_generated_accessor_with_underscore(self):
        self.element.set_fontsize(12)
        self.assertEqual(self.element.get_fontsize().get_value(), "12")
        self.assertEqual(self.element.get_attribute("fontsize").get_value(), "12")

    def test_set_attribute_then_generated_getter(self):
        self.element.set_attribute("mainShape", "box")
        self.assertEqual(self.element.getMainShape().get_value(), "box")

    def test_generated_getter_raises_if_not_found(self):
        with self.assertRaises(AttributeNotFound) as ctx:
            self.element.getNotExisting()
        self.assertEqual(ctx.exception.name, "notExisting")

    def test_prefix_is_case_sensitive(self):
        self.assertIsNone(self.element.SetColor("red"))
        self.assertFalse(self.element.has_attribute("color"))

    def test_unknown_method_returns_none(self):
        self.assertIsNone(self.element.fooBar("baz"))
        self.assertIsNone(self.element.MyMethod())
        self.assertIsNone(self.element.set("x"))
        self.assertEqual(self.element.get_attributes(), [])

    def test_private_names_are_not_dispatched(self):
        with self.assertRaises(AttributeError):
            self.element._setColor
        self.assertFalse(hasattr(self.element, "__deepcopy__"))

    def test_copy(self):
        node = Node("a", "label")
        clone = copy.deepcopy(node)
        self.assertEqual(clone.get_attribute("label").get_value(), "label")
        self.assertIsNot(clone.get_attribute("label"), node.get_attribute("label"))


class GraphAwareTest(unittest.TestCase):
    def test_graph_root_defaults_to_none(self):
        self.assertIsNone(GraphAware().get_graph_root())

    def test_set_graph_root(self):
        graph = Graph.create()
        node = Node("a")
        node.set_graph_root(graph)
        self.assertIs(node.get_graph_root(), graph)

    def test_graph_root_does_not_keep_graph_alive(self):
        graph = Graph.create()
        node = Node("a")
        graph.set_node(node)
        del graph
        gc.collect()
        self.assertIsNone(node.get_graph_root())
