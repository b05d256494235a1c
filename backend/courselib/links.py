"""Hypermedia links for the author resources."""

from __future__ import annotations

import uuid
from enum import Enum

from starlette.requests import Request

from courselib.schemas import AuthorsResourceParameters, LinkDto


class ResourceUriType(Enum):
    PREVIOUS_PAGE = "previous_page"
    CURRENT_PAGE = "current_page"
    NEXT_PAGE = "next_page"


class LinkBuilder:
    """Builds absolute link URIs from the named routes of the current app."""

    def __init__(self, request: Request):
        self.request = request

    def _url(self, route_name: str, query: dict | None = None, **path_params: str) -> str:
        url = self.request.url_for(route_name, **path_params)
        if query:
            url = url.include_query_params(**query)
        return str(url)

    def authors_resource_uri(
        self, params: AuthorsResourceParameters, uri_type: ResourceUriType
    ) -> str:
        """URI of a page of the author collection.

        The query is the one that produced the current page; only the page
        number changes between previous, current and next.
        """
        if uri_type is ResourceUriType.PREVIOUS_PAGE:
            params = params.for_page(params.page_number - 1)
        elif uri_type is ResourceUriType.NEXT_PAGE:
            params = params.for_page(params.page_number + 1)
        return self._url("get_authors", params.to_query_params())

    def links_for_author(self, author_id: uuid.UUID, fields: str | None = None) -> list[LinkDto]:
        query = {"fields": fields} if fields and fields.strip() else None
        return [
            LinkDto(href=self._url("get_author", query, author_id=str(author_id)), rel="self", method="GET"),
            LinkDto(
                href=self._url("create_course_for_author", author_id=str(author_id)),
                rel="create_course_for_author",
                method="POST",
            ),
            LinkDto(
                href=self._url("get_courses_for_author", author_id=str(author_id)),
                rel="courses",
                method="GET",
            ),
        ]

    def links_for_authors(
        self,
        params: AuthorsResourceParameters,
        has_next: bool,
        has_previous: bool,
    ) -> list[LinkDto]:
        links = [
            LinkDto(
                href=self.authors_resource_uri(params, ResourceUriType.CURRENT_PAGE),
                rel="self",
                method="GET",
            )
        ]
        if has_next:
            links.append(
                LinkDto(
                    href=self.authors_resource_uri(params, ResourceUriType.NEXT_PAGE),
                    rel="nextPage",
                    method="GET",
                )
            )
        if has_previous:
            links.append(
                LinkDto(
                    href=self.authors_resource_uri(params, ResourceUriType.PREVIOUS_PAGE),
                    rel="previousPage",
                    method="GET",
                )
            )
        return links

    def links_for_root(self) -> list[LinkDto]:
        return [
            LinkDto(href=self._url("get_root"), rel="self", method="GET"),
            LinkDto(href=self._url("get_authors"), rel="authors", method="GET"),
            LinkDto(href=self._url("create_author"), rel="create_author", method="POST"),
        ]
