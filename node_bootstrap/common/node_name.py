from haikunator import Haikunator
from node_bootstrap.common.constants import NODE_NAME_MAX_LENGTH


def generate_node_name() -> str:
    """Generates a random human-readable node name such as `delicate-haze-4517`.

    Candidates are sampled until one is shorter than :data:`NODE_NAME_MAX_LENGTH` characters,
    which nearly always succeeds on the first draw. Names are not unique and nothing is
    remembered between calls.
    """
    generator = Haikunator()
    while True:
        node_name = generator.haikunate()
        if len(node_name) < NODE_NAME_MAX_LENGTH:
            return node_name
