#!/usr/bin/env python3
"""Demonstration of querying a normalized store with GraphQL.

This script shows how to:
1. Keep data normalized (entities by id)
2. Write a resolver that follows references through the context
3. Get denormalized, query-shaped output back

No server or schema is involved - the resolver is the only link between
the query and the data.
"""

import json

from gql_anywhere import execute

STORE = {
    "result": [1, 2],
    "entities": {
        "articles": {
            1: {"id": 1, "title": "Some Article", "author": 1},
            2: {"id": 2, "title": "Other Article", "author": 2},
        },
        "users": {
            1: {"id": 1, "name": "Dan"},
            2: {"id": 2, "name": "Ada"},
        },
    },
}

# Which fields of which entity type hold references
REFERENCES = {"articles": {"author": "users"}}

QUERY = """
    query Articles($withAuthor: Boolean!) {
      articles: result {
        title
        writtenBy: author @include(if: $withAuthor) {
          name
        }
      }
    }
"""


def resolver(field_name, root, args, store, info):
    if root is None:
        return [
            {**store["entities"]["articles"][id_], "__typename": "articles"}
            for id_ in store["result"]
        ]

    target = REFERENCES.get(root.get("__typename"), {}).get(field_name)
    if target:
        return {**store["entities"][target][root[field_name]], "__typename": target}
    return root.get(field_name)


def main():
    print("=== Normalized Store Demo ===\n")

    for with_author in (False, True):
        print(f"withAuthor={with_author}:")
        result = execute(resolver, QUERY, None, STORE, {"withAuthor": with_author})
        print(json.dumps(result, indent=2))
        print()


if __name__ == "__main__":
    main()
