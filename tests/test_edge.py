import gc
import unittest
from unittest import mock

from dotgraph import AttributeNotFound, Edge, Graph, Node


class EdgeTest(unittest.TestCase):
    def setUp(self):
        self.edge = Edge(Node("from"), Node("to"))

    def test_construct(self):
        from_node = mock.Mock(spec=Node)
        to_node = mock.Mock(spec=Node)
        edge = Edge(from_node, to_node)
        self.assertIs(edge.get_from(), from_node)
        self.assertIs(edge.get_to(), to_node)

    def test_create(self):
        from_node, to_node = Node("from"), Node("to")
        edge = Edge.create(from_node, to_node)
        self.assertIsInstance(edge, Edge)
        self.assertIs(edge.get_from(), from_node)
        self.assertIs(edge.get_to(), to_node)

    def test_generated_accessors(self):
        self.assertIs(self.edge.setLabel("my label"), self.edge)
        self.assertEqual(self.edge.getLabel().get_value(), "my label")
        self.assertIsNone(self.edge.someNonExistingMethod())

    def test_get_non_existing_attribute_raises(self):
        with self.assertRaises(AttributeNotFound) as ctx:
            self.edge.getLabel()
        self.assertEqual(str(ctx.exception), 'Attribute with name "label" was not found.')

    def test_to_string_directed(self):
        graph = Graph.create()
        graph.link(self.edge)
        self.edge.setLabel("MyLabel")
        self.edge.setWeight(45)

        dot = '"from" -> "to" [\nlabel="MyLabel"\nweight="45"\n]'
        self.assertEqual(str(self.edge), dot)

    def test_to_string_undirected(self):
        graph = Graph.create(directed=False)
        graph.link(self.edge)
        self.edge.setLabel("MyLabel")
        self.edge.setWeight(45)

        dot = '"from" -- "to" [\nlabel="MyLabel"\nweight="45"\n]'
        self.assertEqual(str(self.edge), dot)

    def test_to_string_without_graph(self):
        self.assertEqual(str(self.edge), '"from" -- "to" [\n\n]')

    def test_connector_follows_current_graph_type(self):
        graph = Graph.create()
        graph.link(self.edge)
        self.assertEqual(self.edge.connector, "->")

        graph.set_type("graph")
        self.assertEqual(self.edge.connector, "--")

    def test_connector_in_subgraph(self):
        parent = Graph.create()
        cluster = Graph("cluster_a")
        cluster.link(self.edge)
        self.assertEqual(self.edge.connector, "->")

        parent.add_graph(cluster)
        self.assertEqual(self.edge.connector, "->")

        parent.set_type("graph")
        self.assertEqual(self.edge.connector, "--")

    def test_connector_in_detached_subgraph(self):
        parent = Graph.create()
        cluster = Graph("cluster_a")
        parent.add_graph(cluster)
        cluster.link(self.edge)
        del parent
        gc.collect()
        self.assertEqual(self.edge.connector, "--")

    def test_to_string_escapes_node_names(self):
        edge = Edge(Node('a"b'), Node("c\\d"))
        self.assertEqual(str(edge), '"a\\"b" -- "c\\\\d" [\n\n]')

    def test_to_string_uses_current_node_names(self):
        graph = Graph.create()
        graph.link(self.edge)
        self.edge.get_from().set_name("renamed")
        self.assertEqual(str(self.edge), '"renamed" -> "to" [\n\n]')
