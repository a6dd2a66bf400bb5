"""Example schema served when no other schema is wired in."""

import strawberry


@strawberry.type
class Query:
    @strawberry.field
    def hello(self) -> str | None:
        return "Hello world!"


schema = strawberry.Schema(query=Query)
