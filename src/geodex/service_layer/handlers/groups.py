"""Group handlers."""

from collections.abc import Callable

from geodex.domain.records import Group, User
from geodex.interfaces.cancellation import CancellationSignal
from geodex.interfaces.unit_of_work import AbstractUnitOfWork
from geodex.service_layer import commands, queries
from geodex.service_layer.composer import EqualsFilter, QueryResult, compose
from geodex.service_layer.responses import CommandResponse

from ._common import (
    done,
    duplicate_name,
    find_by_id,
    has_children,
    name_exists,
    not_found,
    require_open,
)

ENTITY = "Group"


def create_group(
    cmd: commands.CreateGroup,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    with uow:
        if name_exists(uow.groups, Group.title, cmd.title, cancellation=cancellation):
            return CommandResponse.error(duplicate_name(ENTITY))

        group = uow.groups.create(Group(title=cmd.title.strip()))
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "created"), group.id)


def update_group(
    cmd: commands.UpdateGroup,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    with uow:
        if name_exists(
            uow.groups,
            Group.title,
            cmd.title,
            exclude_id=cmd.id,
            id_column=Group.id,
            cancellation=cancellation,
        ):
            return CommandResponse.error(duplicate_name(ENTITY))

        group = find_by_id(uow.groups, Group.id, cmd.id, cancellation)
        if group is None:
            return CommandResponse.error(not_found(ENTITY))

        group.title = cmd.title.strip()
        uow.groups.update(group)
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "updated"), group.id)


def delete_group(
    cmd: commands.DeleteGroup,
    cancellation: CancellationSignal,
    uow: AbstractUnitOfWork,
) -> CommandResponse:
    """Delete a group nobody belongs to."""
    with uow:
        group = find_by_id(uow.groups, Group.id, cmd.id, cancellation)
        if group is None:
            return CommandResponse.error(not_found(ENTITY))

        if uow.users.query().where(User.group_id == group.id).exists(cancellation):
            return CommandResponse.error(has_children(ENTITY, "users"))

        uow.groups.delete(group)
        uow.commit(cancellation)
        return CommandResponse.success(done(ENTITY, "deleted"), cmd.id)


def query_groups(
    query: queries.GroupQuery,
    cancellation: CancellationSignal,  # pylint: disable=unused-argument
    uow: AbstractUnitOfWork,
) -> QueryResult[queries.GroupResponse]:
    require_open(uow)
    result = compose(
        uow.groups.query(),
        default_order=[Group.title.asc()],
        tie_breakers=[Group.id],
        filters=[EqualsFilter(Group.id, query.id)],
    )
    return result.map(queries.GroupResponse.from_record)


COMMAND_HANDLERS: dict[type, Callable[..., CommandResponse]] = {
    commands.CreateGroup: create_group,
    commands.UpdateGroup: update_group,
    commands.DeleteGroup: delete_group,
}

QUERY_HANDLERS: dict[type, Callable[..., QueryResult]] = {
    queries.GroupQuery: query_groups,
}
