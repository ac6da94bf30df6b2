from dotgraph import Edge, Graph, Node

graph = Graph.create("PigeonPost")
graph.set_rankdir("BT")
graph.set_attribute("fontname", "Bitstream Vera Sans")

domain = Graph("cluster_domain")
domain.setLabel("Domain")
graph.add_graph(domain)

pigeon = Node("Pigeon", "Pigeon|+ name : string\\l+ home_country : string\\l|+ fly(): void\\l")
pigeon.set_shape("record")
domain.set_node(pigeon)

carrier = Node("CarrierPigeon", "CarrierPigeon||+ ship(): boolean\\l")
carrier.set_shape("record")
domain.set_node(carrier)

graph.link(Edge(carrier, graph.find_node("Pigeon")).set_arrowhead("empty"))

print(graph)
graph.export("png", "pigeon_post.png")
