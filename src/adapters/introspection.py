"""Introspection transport.

Two kinds of request go to an endpoint:
- `fetch_introspection_result`: standard graphql-core introspection query,
  decoded to the `data` mapping that `build_client_schema` expects.
- `fetch_raw_introspection`: POST of the fixed `INTROSPECTION_REQUEST_BODY`,
  returning the response body untouched so it can be stored verbatim.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from graphql import get_introspection_query

from adapters.http_client import build_async_client
from core.config import AppSettings

INTROSPECTION_QUERY = """
{
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types { ...FullType }
    directives {
      name
      description
      locations
      args { ...InputValue }
    }
  }
}

fragment FullType on __Type {
  kind
  name
  description
  fields(includeDeprecated: true) {
    name
    description
    args { ...InputValue }
    type { ...TypeRef }
    isDeprecated
    deprecationReason
  }
  inputFields { ...InputValue }
  interfaces { ...TypeRef }
  enumValues(includeDeprecated: true) {
    name
    description
    isDeprecated
    deprecationReason
  }
  possibleTypes { ...TypeRef }
}

fragment InputValue on __InputValue {
  name
  description
  type { ...TypeRef }
  defaultValue
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
""".strip()

INTROSPECTION_REQUEST_BODY = json.dumps({"query": INTROSPECTION_QUERY})


class IntrospectionError(RuntimeError):
    """The endpoint answered, but not with a usable introspection result."""


async def fetch_raw_introspection(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    async with build_async_client(settings, extra_headers=headers, transport=transport) as client:
        resp = await client.post(url, content=INTROSPECTION_REQUEST_BODY)
    resp.raise_for_status()
    return resp.text


async def fetch_introspection_result(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """Run the graphql-core introspection query and return its `data` part."""

    payload = {"query": get_introspection_query(descriptions=True)}
    async with build_async_client(settings, extra_headers=headers, transport=transport) as client:
        resp = await client.post(url, json=payload)
    resp.raise_for_status()

    try:
        data = resp.json()
    except json.JSONDecodeError as exc:
        raise IntrospectionError(f"Endpoint {url} did not return JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise IntrospectionError(f"Unexpected introspection response from {url}")
    if data.get("errors"):
        raise IntrospectionError(f"Introspection returned errors: {data['errors']}")
    result = data.get("data")
    if not isinstance(result, dict) or "__schema" not in result:
        raise IntrospectionError(
            f"Introspection response from {url} is missing '__schema' (keys: {sorted(data)})"
        )
    return result
