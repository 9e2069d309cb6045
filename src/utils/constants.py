from enum import Enum


class HubspotConst:
    EXCHANGE_URL = "https://api.hubapi.com/oauth/v1/token"
    ACCESS_DETAILS_URL = "https://api.hubapi.com/oauth/v1/access-tokens"
    BASE_CRM_URL = "https://api.hubapi.com/crm/v3/objects"
    BASE_CRM_V4_URL = "https://api.hubapi.com/crm/v4"
    SCHEMAS_URL = "https://api.hubapi.com/crm/v3/schemas"
    PROPERTIES_URL = "https://api.hubapi.com/crm/v3/properties"
    ACTIONS_URL = "https://api.hubapi.com/automation/v4/actions"
    SETTINGS_URL = "https://app.hubspot.com/integrations-settings/{hub_id}/installed"
    HTTP_TIMEOUT = 10.0
    ASSOCIATION_PAGE_SIZE = 500

    # value, label
    STANDARD_OBJECTS: list = [
        ("contacts", "Contacts"),
        ("companies", "Companies"),
        ("deals", "Deals"),
        ("tickets", "Tickets"),
    ]

    # workflow callbacks name the enrolled object in upper-case singular form
    WORKFLOW_OBJECT_TYPES: dict = {
        "CONTACT": "contacts",
        "COMPANY": "companies",
        "DEAL": "deals",
        "TICKET": "tickets",
    }

    UNLABELED_ASSOCIATION = "Unlabeled"


class SelectionMode(str, Enum):
    PROPERTY = "property"
    ASSOCIATION_LABEL = "associationLabel"


class WorkflowActionConst:
    ACTION_PATH = "/hubspot/disassociate"
    OBJECTS_OPTIONS_PATH = "/hubspot/fetchObjects"
    OPTIONS_PATH = "/hubspot/fetchOptions"

    ACTION_NAME = "Remove Association"
    ACTION_DESCRIPTION = (
        "This action will remove the association between two objects. "
        'The source object is defined by the "Workflow Type".'
    )
    ACTION_CARD_CONTENT = "Remove the association between objects"

    INPUT_FIELD_LABELS: dict = {
        "objectInput": "Object to Update Association For",
        "selectionInput": "Remove Association Based On",
        "optionsInput": "Select Property/Association Label",
        "optionValue": "Specify the Property Value",
    }
    INPUT_FIELD_DESCRIPTIONS: dict = {
        "objectInput": "Specify the object for which you want to remove the association.",
        "selectionInput": (
            "Choose the criteria for removing the association, such as "
            "Properties or Association Labels."
        ),
        "optionsInput": "Select the property or label that defines the association to remove.",
        "optionValue": (
            "The association will be removed if the selected property matches the "
            "specified value (applicable only when property is chosen as the criteria)."
        ),
    }
    SELECTION_OPTIONS: list = [
        {"value": SelectionMode.ASSOCIATION_LABEL.value, "label": "Association Label"},
        {"value": SelectionMode.PROPERTY.value, "label": "Property"},
    ]
