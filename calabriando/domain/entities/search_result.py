from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    id: str
    table_name: str
    title: str
    description: str
    link: str
    label: str
