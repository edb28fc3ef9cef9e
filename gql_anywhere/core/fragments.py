"""Fragment registry: named fragment definitions of a document."""

from graphql import DocumentNode, FragmentDefinitionNode


def build_fragment_map(document: DocumentNode) -> dict[str, FragmentDefinitionNode]:
    """Collect the document's fragment definitions by name.

    Type conditions are kept on the returned nodes but never checked.
    """
    return {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }
