"""Tests for the authorization engine mirror collector."""

import pytest

from neo_dualwrite.config.settings import DualWriteSettings
from neo_dualwrite.core.exceptions import AuthzPaginationError, AuthzReadError
from neo_dualwrite.features.collectors.services import AuthzTupleCollector, create_authz_collector
from neo_dualwrite.integrations.authz.protocols import ReadRequest


class TestAuthzTupleCollector:
    @pytest.mark.asyncio
    async def test_single_page(self, mock_authz_client, make_page):
        mock_authz_client.read.return_value = make_page("team:t1#team-admin@user:u1")
        collector = AuthzTupleCollector(["team-admin"])

        result = await collector.collect(mock_authz_client, "team:t1", "default")

        assert list(result) == ["team:t1#team-admin@user:u1"]
        mock_authz_client.read.assert_awaited_once_with(
            ReadRequest(namespace="default", object="team:t1", relation="team-admin")
        )

    @pytest.mark.asyncio
    async def test_follows_continuation_token(self, mock_authz_client, make_page):
        mock_authz_client.read.side_effect = [
            make_page("team:t1#team-member@user:u1", token="page-2"),
            make_page("team:t1#team-member@user:u2"),
        ]
        collector = AuthzTupleCollector(["team-member"])

        result = await collector.collect(mock_authz_client, "team:t1", "default")

        assert set(result) == {
            "team:t1#team-member@user:u1",
            "team:t1#team-member@user:u2",
        }
        first, second = [c.args[0] for c in mock_authz_client.read.await_args_list]
        assert first.continuation_token == ""
        assert second.continuation_token == "page-2"
        assert second.object == "team:t1"
        assert second.relation == "team-member"

    @pytest.mark.asyncio
    async def test_page_size_is_forwarded(self, mock_authz_client, make_page):
        mock_authz_client.read.return_value = make_page()
        collector = AuthzTupleCollector(["get"], page_size=50)

        await collector.collect(mock_authz_client, "folder:f1", "default")

        assert mock_authz_client.read.await_args.args[0].page_size == 50

    @pytest.mark.asyncio
    async def test_relations_are_flattened(self, mock_authz_client, make_page):
        mock_authz_client.read.side_effect = [
            make_page("folder:f2#parent@folder:f1"),
            make_page("folder:f2#get@user:u1", "folder:f2#get@team:t1#member"),
        ]
        collector = AuthzTupleCollector(["parent", "get"])

        result = await collector.collect(mock_authz_client, "folder:f2", "default")

        assert set(result) == {
            "folder:f2#parent@folder:f1",
            "folder:f2#get@user:u1",
            "folder:f2#get@team:t1#member",
        }
        relations = [c.args[0].relation for c in mock_authz_client.read.await_args_list]
        assert relations == ["parent", "get"]

    @pytest.mark.asyncio
    async def test_folder_resource_tuples_keyed_without_condition(self, mock_authz_client, make_page):
        mock_authz_client.read.return_value = make_page(
            "folder:f1#resource_get@user:u1,group_filter(g1)",
            "folder:f1#resource_get@user:u1,group_filter(g2)",
        )
        collector = AuthzTupleCollector(["resource_get"])

        result = await collector.collect(mock_authz_client, "folder:f1", "default")

        assert list(result) == ["folder:f1#resource_get@user:u1"]
        assert result["folder:f1#resource_get@user:u1"].condition.group_resources == ("g2",)

    @pytest.mark.asyncio
    async def test_read_error_aborts_collection(self, mock_authz_client, make_page):
        mock_authz_client.read.side_effect = [
            make_page("folder:f2#parent@folder:f1"),
            AuthzReadError("folder:f2", "get", "unavailable", status_code=503),
        ]
        collector = AuthzTupleCollector(["parent", "get"])

        with pytest.raises(AuthzReadError):
            await collector.collect(mock_authz_client, "folder:f2", "default")

    @pytest.mark.asyncio
    async def test_error_on_later_page_aborts(self, mock_authz_client, make_page):
        mock_authz_client.read.side_effect = [
            make_page("team:t1#team-member@user:u1", token="page-2"),
            AuthzReadError("team:t1", "team-member", "timeout"),
        ]
        collector = AuthzTupleCollector(["team-member"])

        with pytest.raises(AuthzReadError):
            await collector.collect(mock_authz_client, "team:t1", "default")

    @pytest.mark.asyncio
    async def test_token_that_does_not_advance(self, mock_authz_client, make_page):
        mock_authz_client.read.return_value = make_page("team:t1#team-member@user:u1", token="same")
        collector = AuthzTupleCollector(["team-member"])

        with pytest.raises(AuthzPaginationError) as exc_info:
            await collector.collect(mock_authz_client, "team:t1", "default")

        assert exc_info.value.pages == 2
        assert mock_authz_client.read.await_count == 2

    @pytest.mark.asyncio
    async def test_page_limit(self, mock_authz_client, make_page):
        mock_authz_client.read.side_effect = [
            make_page(token="p2"),
            make_page(token="p3"),
            make_page(token="p4"),
        ]
        collector = AuthzTupleCollector(["team-member"], max_pages=2)

        with pytest.raises(AuthzPaginationError):
            await collector.collect(mock_authz_client, "team:t1", "default")

        assert mock_authz_client.read.await_count == 2

    @pytest.mark.asyncio
    async def test_namespace_defaults_to_collector_namespace(self, mock_authz_client, make_page):
        mock_authz_client.read.return_value = make_page()
        collector = AuthzTupleCollector(["get"], namespace="stacks-1")

        await collector.collect(mock_authz_client, "folder:f1")

        assert mock_authz_client.read.await_args.args[0].namespace == "stacks-1"

    @pytest.mark.asyncio
    async def test_explicit_namespace_overrides_default(self, mock_authz_client, make_page):
        mock_authz_client.read.return_value = make_page()
        collector = AuthzTupleCollector(["get"], namespace="stacks-1")

        await collector.collect(mock_authz_client, "folder:f1", "stacks-2")

        assert mock_authz_client.read.await_args.args[0].namespace == "stacks-2"

    @pytest.mark.asyncio
    async def test_missing_namespace(self, mock_authz_client):
        collector = AuthzTupleCollector(["get"])

        with pytest.raises(ValueError):
            await collector.collect(mock_authz_client, "folder:f1")

        mock_authz_client.read.assert_not_awaited()

    def test_invalid_max_pages(self):
        with pytest.raises(ValueError):
            AuthzTupleCollector(["get"], max_pages=0)


class TestCreateAuthzCollector:
    def test_team_relations(self):
        collector = create_authz_collector("team")
        assert collector.relations == ["team-admin", "team-member"]

    def test_folder_relations_include_parent_and_resource_relations(self):
        collector = create_authz_collector("folder")
        assert "parent" in collector.relations
        assert "resource_get" in collector.relations

    def test_settings_applied(self):
        settings = DualWriteSettings(authz_page_size=25, authz_max_pages=10)
        collector = create_authz_collector("resource", settings)
        assert collector.page_size == 25
        assert collector.max_pages == 10

    def test_settings_namespace_applied(self):
        settings = DualWriteSettings(authz_namespace="stacks-1")
        collector = create_authz_collector("folder", settings)
        assert collector.namespace == "stacks-1"

    def test_unknown_object_type(self):
        with pytest.raises(ValueError):
            create_authz_collector("datasource")
