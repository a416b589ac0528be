from abc import ABC, abstractmethod

from node_bootstrap.domain.entities.chain_spec import ChainSpec


class NodeProgram(ABC):
    """
    Describes the program that is bootstrapping a node: its identity, where its data lives by
    default, and how it turns a chain id into a chain specification.
    """

    impl_name: str
    impl_version: str
    executable_name: str
    author: str

    def client_id(self) -> str:
        return f"{self.impl_name}/v{self.impl_version}"

    @abstractmethod
    def load_spec(self, chain_id: str) -> ChainSpec:
        """
        Returns the chain specification for `chain_id`. An empty id asks for the program's
        default chain. May raise if the id is unknown or the spec cannot be read.
        """
