import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from src.main import app
from src.routers import hubspot as hubspot_routes
from src.routers import workflow as workflow_routes
from src.schemas import DisassociationResult, OptionOut
from src.services import DisassociationService, HubspotService, WorkflowActionService
from src.utils.exceptions import AccountNotFoundError, InputValidationError, RemoteAPIError

ORIGIN = {"portalId": 123, "actionDefinitionId": 9}


class RouterTestCase(unittest.TestCase):
    def setUp(self):
        self.hubspot = MagicMock(spec=HubspotService)
        self.disassociation = MagicMock(spec=DisassociationService)
        self.workflow_action = MagicMock(spec=WorkflowActionService)
        app.dependency_overrides[workflow_routes.HubspotDep.dependency] = lambda: self.hubspot
        app.dependency_overrides[hubspot_routes.HubspotDep.dependency] = lambda: self.hubspot
        app.dependency_overrides[workflow_routes.DisassociationDep.dependency] = lambda: self.disassociation
        app.dependency_overrides[workflow_routes.WorkflowActionDep.dependency] = lambda: self.workflow_action
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()


class TestWorkflowOptionRoutes(RouterTestCase):
    """Tests for the option endpoints HubSpot calls while a workflow is edited."""

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "OK")

    def test_fetch_objects(self):
        self.hubspot.list_object_types.return_value = [OptionOut(value="contacts", label="Contacts")]

        response = self.client.post("/hubspot/fetchObjects", json={"origin": ORIGIN})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"success": True, "options": [{"value": "contacts", "label": "Contacts"}]},
        )
        self.hubspot.list_object_types.assert_called_once_with("123")

    def test_fetch_objects_without_portal_is_rejected(self):
        response = self.client.post("/hubspot/fetchObjects", json={"origin": {}})

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()["success"])
        self.hubspot.list_object_types.assert_not_called()

    def test_fetch_props(self):
        self.hubspot.list_properties.return_value = [OptionOut(value="name", label="Name")]

        response = self.client.post(
            "/hubspot/fetchProps",
            json={"origin": ORIGIN, "inputFields": {"objectInput": {"value": "companies"}}},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"options": [{"value": "name", "label": "Name"}]})
        self.hubspot.list_properties.assert_called_once_with("123", "companies")

    def test_fetch_options_for_property_mode(self):
        self.hubspot.list_properties.return_value = [OptionOut(value="status", label="Status")]

        response = self.client.post(
            "/hubspot/fetchOptions",
            json={
                "origin": ORIGIN,
                "objectTypeId": "0-1",
                "inputFields": {
                    "objectInput": {"value": "companies"},
                    "selectionInput": {"value": "property"},
                },
            },
        )

        self.assertEqual(response.json(), {"options": [{"value": "status", "label": "Status"}]})
        self.hubspot.list_association_labels.assert_not_called()

    def test_fetch_options_for_association_label_mode(self):
        self.hubspot.list_association_labels.return_value = [OptionOut(value="5", label="Billing")]

        response = self.client.post(
            "/hubspot/fetchOptions",
            json={
                "origin": ORIGIN,
                "objectTypeId": "0-1",
                "inputFields": {
                    "objectInput": {"value": "companies"},
                    "selectionInput": {"value": "associationLabel"},
                },
            },
        )

        self.assertEqual(response.json(), {"options": [{"value": "5", "label": "Billing"}]})
        self.hubspot.list_association_labels.assert_called_once_with("123", "0-1", "companies")

    def test_fetch_options_without_mode_is_empty(self):
        response = self.client.post(
            "/hubspot/fetchOptions",
            json={"origin": ORIGIN, "inputFields": {"objectInput": {"value": "companies"}}},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"options": []})
        self.hubspot.list_properties.assert_not_called()
        self.hubspot.list_association_labels.assert_not_called()

    def test_fetch_association_labels_reads_field_value(self):
        self.hubspot.list_association_labels.return_value = [OptionOut(value="279", label="Unlabeled")]

        response = self.client.post(
            "/hubspot/fethcAssociationLabels",
            json={
                "origin": ORIGIN,
                "objectTypeId": "0-1",
                "fields": {"objectInput": {"fieldValue": {"value": "companies"}}},
            },
        )

        self.assertEqual(
            response.json(),
            {"success": True, "options": [{"value": "279", "label": "Unlabeled"}]},
        )
        self.hubspot.list_association_labels.assert_called_once_with("123", "0-1", "companies")

    def test_remote_error_is_echoed_as_500(self):
        self.hubspot.list_object_types.side_effect = RemoteAPIError(
            "HubSpot returned error response: 401", upstream_status=401, body={"category": "EXPIRED_AUTHENTICATION"}
        )

        response = self.client.post("/hubspot/fetchObjects", json={"origin": ORIGIN})

        self.assertEqual(response.status_code, 500)
        body = response.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["details"]["status"], 401)

    def test_unknown_account_is_500(self):
        self.hubspot.list_object_types.side_effect = AccountNotFoundError("123")

        response = self.client.post("/hubspot/fetchObjects", json={"origin": ORIGIN})

        self.assertEqual(response.status_code, 500)
        self.assertIn("123", response.json()["message"])


class TestDisassociateRoute(RouterTestCase):
    """Tests for the workflow action execution endpoint."""

    BODY = {
        "origin": ORIGIN,
        "object": {"objectType": "CONTACT", "objectId": 10},
        "inputFields": {
            "objectInput": "companies",
            "selectionInput": "associationLabel",
            "optionsInput": "5",
        },
    }

    def test_disassociate_success(self):
        request = object()
        self.disassociation.build_request.return_value = request
        self.disassociation.disassociate.return_value = DisassociationResult(
            success=True, message="Disassociation completed: 2 associations removed", targets=1, deleted=2
        )

        response = self.client.post("/hubspot/disassociate", json=self.BODY)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"success": True, "message": "Disassociation completed: 2 associations removed"},
        )
        self.disassociation.disassociate.assert_called_once_with(request)

    def test_disassociate_validation_failure_is_400(self):
        self.disassociation.build_request.side_effect = InputValidationError(
            "Missing required fields: inputFields.objectInput"
        )

        response = self.client.post("/hubspot/disassociate", json={"origin": ORIGIN})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(
            response.json(),
            {"success": False, "message": "Missing required fields: inputFields.objectInput"},
        )
        self.disassociation.disassociate.assert_not_called()


class TestOAuthCallbackRoute(RouterTestCase):
    """Tests for the OAuth install callback."""

    def test_missing_code_is_400(self):
        response = self.client.get("/hubspot/oauth/callback")

        self.assertEqual(response.status_code, 400)
        self.assertFalse(response.json()["success"])
        self.hubspot.exchange_code.assert_not_called()

    def test_successful_exchange_redirects_to_settings(self):
        self.hubspot.exchange_code.return_value = "4455"
        self.hubspot.get_settings_url.return_value = (
            "https://app.hubspot.com/integrations-settings/4455/installed"
        )

        response = self.client.get(
            "/hubspot/oauth/callback", params={"code": "abc"}, follow_redirects=False
        )

        self.assertEqual(response.status_code, 307)
        self.assertEqual(
            response.headers["location"],
            "https://app.hubspot.com/integrations-settings/4455/installed",
        )
        self.hubspot.exchange_code.assert_called_once_with("abc")

    def test_failed_exchange_is_500(self):
        self.hubspot.exchange_code.side_effect = RemoteAPIError(
            "HubSpot returned error response: 400", upstream_status=400
        )

        response = self.client.get("/hubspot/oauth/callback", params={"code": "bad"})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(
            response.json(), {"success": False, "message": "Error during OAuth process"}
        )


class TestWorkflowActionRoutes(RouterTestCase):
    def test_create_custom_workflow_action(self):
        self.workflow_action.create_action.return_value = {"id": "99"}

        response = self.client.post("/hubspot/createCustomWorkflowAction")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"id": "99"})

    def test_update_custom_workflow_action(self):
        self.workflow_action.update_action.return_value = {"id": "99", "revisionId": "2"}

        response = self.client.patch(
            "/hubspot/updateCustomWorkflowAction", json={"definitionId": "99"}
        )

        self.assertEqual(response.status_code, 200)
        self.workflow_action.update_action.assert_called_once_with("99")

    def test_update_requires_definition_id(self):
        response = self.client.patch("/hubspot/updateCustomWorkflowAction", json={})

        self.assertEqual(response.status_code, 400)
        self.workflow_action.update_action.assert_not_called()


if __name__ == "__main__":
    unittest.main()
