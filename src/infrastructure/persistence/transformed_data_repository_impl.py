"""Transformed data repository implementation using JSON files."""

import asyncio
import json
import logging

from dataclasses import asdict
from pathlib import Path
from typing import Any

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from src.domain.repositories.transformed_data_repository import (
    TransformedDataRepository,
)
from src.domain.value_objects.candidate_list import (
    CandidateList,
    CandidateListDocument,
    ListMember,
)
from src.domain.value_objects.member_application import (
    MemberApplication,
    MemberApplications,
)
from src.infrastructure.exceptions import (
    InfrastructureError,
    TransformedDataNotFoundError,
)


logger = logging.getLogger(__name__)


class _CamelModel(PydanticBaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListMemberModel(_CamelModel):
    """List member JSON model."""

    name: str
    position: int


class CandidateListModel(_CamelModel):
    """Candidate list JSON model."""

    name: str
    number: int | None = None
    members: list[ListMemberModel] = []


class CandidateListDocumentModel(_CamelModel):
    """{year}.json model."""

    lists: list[CandidateListModel]
    list_names: list[str]


class MemberApplicationModel(_CamelModel):
    """Member application JSON model."""

    birthday: str
    occupation: str
    party_membership: str
    is_penalty_pending: bool
    different_citizenship: str
    was_convicted_guilty: str
    was_convicted_guilty_details: str
    income_sum_eur: float
    taxes_sum_eur: float
    property_sum_eur: float
    values_sum_eur: float
    money_sum_eur: float
    loans_provided_eur: float
    loans_received_eur: float


_APPLICATIONS_ADAPTER = TypeAdapter(dict[str, MemberApplicationModel | None])


class TransformedDataRepositoryImpl(TransformedDataRepository):
    """Transformed data repository storing pretty-printed JSON files."""

    def __init__(self, data_dir: Path):
        """Initialize repository with the transformed data directory.

        Args:
            data_dir: Directory holding {year}.json and
                members-applications-{year}.json
        """
        self._data_dir = data_dir

    def list_document_path(self, year: int) -> Path:
        return self._data_dir / f"{year}.json"

    def member_applications_path(self, year: int) -> Path:
        return self._data_dir / f"members-applications-{year}.json"

    async def save_list_document(
        self, year: int, document: CandidateListDocument
    ) -> None:
        """選挙年の名簿データを保存."""
        model = self._to_list_document_model(document)
        data = model.model_dump(by_alias=True, exclude_none=True)
        path = self.list_document_path(year)
        await asyncio.to_thread(_write_json, path, data)
        logger.info("名簿データを保存: %s", path)

    async def get_list_document(self, year: int) -> CandidateListDocument:
        """選挙年の名簿データを取得."""
        data = await asyncio.to_thread(_read_json, self.list_document_path(year))
        try:
            model = CandidateListDocumentModel.model_validate(data)
        except ValidationError as e:
            raise InfrastructureError(
                f"名簿データの形式が不正です: {self.list_document_path(year)}",
                {"errors": e.errors()},
            ) from e
        return self._to_list_document(model)

    async def save_member_applications(
        self, year: int, applications: MemberApplications
    ) -> None:
        """選挙年の候補者アンケートを保存."""
        models = {
            key: (
                self._to_application_model(application)
                if application is not None
                else None
            )
            for key, application in applications.items()
        }
        data = _APPLICATIONS_ADAPTER.dump_python(models, by_alias=True)
        path = self.member_applications_path(year)
        await asyncio.to_thread(_write_json, path, data)
        logger.info("候補者アンケートを保存: %s (%d件)", path, len(models))

    async def get_member_applications(self, year: int) -> MemberApplications:
        """選挙年の候補者アンケートを取得."""
        path = self.member_applications_path(year)
        data = await asyncio.to_thread(_read_json, path)
        try:
            models = _APPLICATIONS_ADAPTER.validate_python(data)
        except ValidationError as e:
            raise InfrastructureError(
                f"アンケートデータの形式が不正です: {path}",
                {"errors": e.errors()},
            ) from e
        return {
            key: self._to_application(model) if model is not None else None
            for key, model in models.items()
        }

    def _to_list_document(
        self, model: CandidateListDocumentModel
    ) -> CandidateListDocument:
        return CandidateListDocument(
            lists=[
                CandidateList(
                    name=list_model.name,
                    number=list_model.number,
                    members=[
                        ListMember(name=m.name, position=m.position)
                        for m in list_model.members
                    ],
                )
                for list_model in model.lists
            ],
            list_names=list(model.list_names),
        )

    def _to_list_document_model(
        self, document: CandidateListDocument
    ) -> CandidateListDocumentModel:
        return CandidateListDocumentModel(
            lists=[
                CandidateListModel(
                    name=lst.name,
                    number=lst.number,
                    members=[
                        ListMemberModel(name=m.name, position=m.position)
                        for m in lst.members
                    ],
                )
                for lst in document.lists
            ],
            list_names=document.list_names,
        )

    def _to_application(self, model: MemberApplicationModel) -> MemberApplication:
        return MemberApplication(**model.model_dump())

    def _to_application_model(
        self, application: MemberApplication
    ) -> MemberApplicationModel:
        return MemberApplicationModel(**asdict(application))


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise TransformedDataNotFoundError(str(path))
    return json.loads(path.read_text(encoding="utf-8"))


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, ensure_ascii=False, indent=2, allow_nan=False) + "\n",
        encoding="utf-8",
    )
