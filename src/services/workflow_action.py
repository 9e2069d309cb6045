import logging
from typing import Any, Dict

from src.config.config import settings
from src.gateways.hubspot import HubspotGateway
from src.utils.constants import WorkflowActionConst


class WorkflowActionService:
    """Registers the "Remove Association" custom workflow action with the HubSpot app."""

    def __init__(self, db):
        # definitions live in HubSpot; no DB interactions needed
        self.gateway = HubspotGateway()

    def build_definition(self) -> Dict[str, Any]:
        base_url = settings.api_base_url
        if not base_url:
            raise ValueError("Missing required environment variable: API_BASE_URL")

        def enumeration(name: str, **type_definition) -> Dict[str, Any]:
            return {
                "typeDefinition": {
                    "name": name,
                    "type": "enumeration",
                    "fieldType": "select",
                    **type_definition,
                },
                "supportedValueTypes": ["STATIC_VALUE"],
                "isRequired": True,
            }

        return {
            "actionUrl": f"{base_url}{WorkflowActionConst.ACTION_PATH}",
            "inputFields": [
                enumeration(
                    "objectInput",
                    optionsUrl=f"{base_url}{WorkflowActionConst.OBJECTS_OPTIONS_PATH}",
                ),
                enumeration(
                    "selectionInput",
                    options=WorkflowActionConst.SELECTION_OPTIONS,
                ),
                enumeration(
                    "optionsInput",
                    optionsUrl=f"{base_url}{WorkflowActionConst.OPTIONS_PATH}",
                ),
                {
                    "typeDefinition": {
                        "name": "optionValue",
                        "type": "string",
                        "fieldType": "text",
                    },
                    "supportedValueTypes": ["STATIC_VALUE"],
                    "isRequired": False,
                },
            ],
            "labels": {
                "en": {
                    "actionName": WorkflowActionConst.ACTION_NAME,
                    "actionDescription": WorkflowActionConst.ACTION_DESCRIPTION,
                    "actionCardContent": WorkflowActionConst.ACTION_CARD_CONTENT,
                    "inputFieldLabels": WorkflowActionConst.INPUT_FIELD_LABELS,
                    "inputFieldDescriptions": WorkflowActionConst.INPUT_FIELD_DESCRIPTIONS,
                }
            },
            "published": True,
        }

    def create_action(self) -> Dict[str, Any]:
        result = self.gateway.create_workflow_action(self.build_definition())
        logging.info("Created custom workflow action %s", result.get("id"))
        return result

    def update_action(self, definition_id: str) -> Dict[str, Any]:
        result = self.gateway.update_workflow_action(definition_id, self.build_definition())
        logging.info("Updated custom workflow action %s", definition_id)
        return result
