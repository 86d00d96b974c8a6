"""Record commands: list, create, rename and delete through the message bus.

Every command builds a message, runs it through the
:class:`~geodex.entrypoints.dispatch.Dispatcher` and renders the outcome.
Tables go to stdout; totals and status lines go to stderr. Rejected or failed
requests exit with status 1.
"""

from __future__ import annotations

import click
import click_extra as clickx

from geodex.service_layer import commands, queries
from geodex.service_layer.paging import OrderSpec, PageSpec

from ._app import get_dispatcher
from .helpers import render


def _paging_options(fn):
    fn = click.option(
        "--per-page",
        type=click.IntRange(min=0),
        default=0,
        show_default=True,
        help="Rows per page; 0 returns every row.",
    )(fn)
    fn = click.option(
        "--page",
        type=click.IntRange(min=1),
        default=1,
        show_default=True,
        help="1-based page number (used with --per-page).",
    )(fn)
    fn = click.option(
        "--descending", is_flag=True, help="Sort in descending order."
    )(fn)
    return fn


@click.command()
@click.option(
    "--left",
    is_flag=True,
    help="Include countries without cities (left join).",
)
@click.option("--country-name", help="Case-sensitive fragment of the country name.")
@click.option("--city-name", help="Case-sensitive fragment of the city name.")
@click.option(
    "--order-by",
    type=click.Choice(["country_name", "city_name"], case_sensitive=False),
    default="country_name",
    show_default=True,
)
@_paging_options
@click.pass_context
def locations(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    left: bool,
    country_name: str | None,
    city_name: str | None,
    order_by: str,
    descending: bool,
    page: int,
    per_page: int,
) -> None:
    """List countries joined with their cities."""
    query_type = (
        queries.LocationLeftJoinQuery if left else queries.LocationInnerJoinQuery
    )
    query = query_type(
        country_name=country_name,
        city_name=city_name,
        order=OrderSpec(order_by, descending),
        page=PageSpec(page_number=page, count_per_page=per_page),
    )
    render(get_dispatcher(ctx).dispatch(query))


# --------------------------------------------------------------------------- #
# Countries
# --------------------------------------------------------------------------- #


@click.group(cls=clickx.ExtraGroup)
def countries() -> None:
    """Manage countries."""


@countries.command("list")
@click.option("--id", "id_", type=int, help="Show a single country.")
@click.pass_context
def list_countries(ctx: click.Context, id_: int | None) -> None:
    """List countries with their cities."""
    render(
        get_dispatcher(ctx).dispatch(queries.CountryQuery(id=id_)),
        columns=["id", "name", "cities"],
    )


@countries.command("create")
@click.argument("name")
@click.pass_context
def create_country(ctx: click.Context, name: str) -> None:
    """Create a country named NAME."""
    render(get_dispatcher(ctx).dispatch(commands.CreateCountry(name=name)))


@countries.command("rename")
@click.argument("id_", metavar="ID", type=int)
@click.argument("name")
@click.pass_context
def rename_country(ctx: click.Context, id_: int, name: str) -> None:
    """Rename country ID to NAME."""
    render(get_dispatcher(ctx).dispatch(commands.UpdateCountry(id=id_, name=name)))


@countries.command("delete")
@click.argument("id_", metavar="ID", type=int)
@click.pass_context
def delete_country(ctx: click.Context, id_: int) -> None:
    """Delete country ID (it must have no cities)."""
    render(get_dispatcher(ctx).dispatch(commands.DeleteCountry(id=id_)))


# --------------------------------------------------------------------------- #
# Cities
# --------------------------------------------------------------------------- #


@click.group(cls=clickx.ExtraGroup)
def cities() -> None:
    """Manage cities."""


@cities.command("list")
@click.option("--country-id", type=int, help="Only cities of this country.")
@click.pass_context
def list_cities(ctx: click.Context, country_id: int | None) -> None:
    """List cities with their country names."""
    render(
        get_dispatcher(ctx).dispatch(queries.CityQuery(country_id=country_id)),
        columns=["id", "name", "country_id", "country_name"],
    )


@cities.command("create")
@click.argument("country_id", type=int)
@click.argument("name")
@click.pass_context
def create_city(ctx: click.Context, country_id: int, name: str) -> None:
    """Create city NAME in country COUNTRY_ID."""
    render(
        get_dispatcher(ctx).dispatch(
            commands.CreateCity(name=name, country_id=country_id)
        )
    )


@cities.command("delete")
@click.argument("id_", metavar="ID", type=int)
@click.pass_context
def delete_city(ctx: click.Context, id_: int) -> None:
    """Delete city ID."""
    render(get_dispatcher(ctx).dispatch(commands.DeleteCity(id=id_)))


# --------------------------------------------------------------------------- #
# Groups and users
# --------------------------------------------------------------------------- #


@click.group(cls=clickx.ExtraGroup)
def groups() -> None:
    """Manage user groups."""


@groups.command("list")
@click.pass_context
def list_groups(ctx: click.Context) -> None:
    """List groups by title."""
    render(
        get_dispatcher(ctx).dispatch(queries.GroupQuery()), columns=["id", "title"]
    )


@groups.command("create")
@click.argument("title")
@click.pass_context
def create_group(ctx: click.Context, title: str) -> None:
    """Create a group titled TITLE."""
    render(get_dispatcher(ctx).dispatch(commands.CreateGroup(title=title)))


@click.command()
@click.option("--user-name", help="Case-sensitive fragment of the user name.")
@click.option("--full-name", help="Case-sensitive fragment of 'first last'.")
@click.option(
    "--order-by",
    type=click.Choice([field.value for field in queries.UserOrderField]),
    help="Sort field (default: active first, then registration date).",
)
@_paging_options
@click.pass_context
def users(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    user_name: str | None,
    full_name: str | None,
    order_by: str | None,
    descending: bool,
    page: int,
    per_page: int,
) -> None:
    """List users."""
    query = queries.UserQuery(
        user_name=user_name,
        full_name=full_name,
        order=OrderSpec(order_by, descending),
        page=PageSpec(page_number=page, count_per_page=per_page),
    )
    render(
        get_dispatcher(ctx).dispatch(query),
        columns=[
            "id",
            "user_name",
            "full_name",
            "gender_f",
            "registration_date_f",
            "score_f",
            "is_active_f",
            "group",
            "roles",
        ],
    )
