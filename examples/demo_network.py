import logging
from pynetreach import ENGINES, create_network

logging.basicConfig(level=logging.DEBUG)

EDGES = [(1, 2), (1, 6), (2, 4), (2, 6), (5, 8)]
QUERIES = [(1, 2), (1, 6), (2, 4), (1, 4), (6, 4), (1, 7), (5, 2), (5, 6)]

networks = {name: create_network(8, engine=name) for name in ENGINES}
for network in networks.values():
    for src, dest in EDGES:
        network.connect(src, dest)

for src, dest in QUERIES:
    answers = {name: network.query(src, dest) for name, network in networks.items()}
    assert len(set(answers.values())) == 1, answers
    print(f"query({src}, {dest}) = {answers['bfs']}")

print("components:", networks["disjoint_set"].num_components)
