"""
Demo maintenance requests loaded into the store at startup.
"""
from typing import List

from models.maintenance_request import MaintenanceRequest

_DEMO_ROWS = [
    {
        "id": "M-1001",
        "title": "Leaking faucet in kitchen",
        "property": "123 Main St, Apt 4B",
        "tenant": "John Smith",
        "dateSubmitted": "2023-04-25",
        "status": "pending",
        "priority": "low",
        "category": "plumbing",
        "lastUpdated": "2023-04-25",
        "scheduledDate": None,
        "description": "The kitchen faucet has been leaking steadily for the past two days.",
    },
    {
        "id": "M-1002",
        "title": "AC not working properly",
        "property": "456 Park Ave, Unit 7",
        "tenant": "Sarah Johnson",
        "dateSubmitted": "2023-04-24",
        "status": "in-progress",
        "priority": "urgent",
        "category": "hvac",
        "lastUpdated": "2023-04-24",
        "scheduledDate": None,
        "description": "The AC unit is not cooling properly and making strange noises.",
    },
    {
        "id": "M-1003",
        "title": "Broken window in living room",
        "property": "789 Oak St, Apt 12",
        "tenant": "Michael Brown",
        "dateSubmitted": "2023-04-23",
        "status": "scheduled",
        "priority": "normal",
        "category": "structural",
        "lastUpdated": "2023-04-23",
        "scheduledDate": "2023-04-28",
        "description": "The living room window pane is cracked and no longer latches.",
    },
    {
        "id": "M-1004",
        "title": "Dishwasher not draining",
        "property": "321 Pine St, Unit 3",
        "tenant": "Emily Davis",
        "dateSubmitted": "2023-04-22",
        "status": "completed",
        "priority": "normal",
        "category": "appliance",
        "lastUpdated": "2023-04-22",
        "scheduledDate": "2023-04-22",
        "description": "The dishwasher isn't draining properly after cycles and leaves standing water.",
    },
    {
        "id": "M-1005",
        "title": "Smoke detector beeping",
        "property": "567 Oak St, Apt 8",
        "tenant": "Robert Wilson",
        "dateSubmitted": "2023-04-21",
        "status": "pending",
        "priority": "urgent",
        "category": "electrical",
        "lastUpdated": "2023-04-21",
        "scheduledDate": None,
        "description": "Smoke detector has been beeping intermittently for the past week.",
    },
    {
        "id": "M-1006",
        "title": "Leaking Kitchen Faucet",
        "property": "123 Main St, Apt 4B",
        "tenant": "John Smith",
        "dateSubmitted": "2023-05-10",
        "status": "in-progress",
        "priority": "normal",
        "category": "plumbing",
        "lastUpdated": "2023-05-12",
        "scheduledDate": "2023-05-15",
        "description": "The kitchen faucet has been leaking steadily for the past two days.",
    },
    {
        "id": "M-1007",
        "title": "Broken Air Conditioning",
        "property": "456 Oak Ave, Unit 7",
        "tenant": "Sarah Johnson",
        "dateSubmitted": "2023-05-08",
        "status": "scheduled",
        "priority": "urgent",
        "category": "hvac",
        "lastUpdated": "2023-05-09",
        "scheduledDate": "2023-05-11",
        "description": "The AC unit is not cooling properly and making strange noises.",
    },
    {
        "id": "M-1008",
        "title": "Bathroom Light Fixture Not Working",
        "property": "789 Pine St, Apt 2C",
        "tenant": "Michael Brown",
        "dateSubmitted": "2023-05-05",
        "status": "completed",
        "priority": "normal",
        "category": "electrical",
        "lastUpdated": "2023-05-07",
        "scheduledDate": "2023-05-06",
        "description": "The light fixture in the main bathroom doesn't turn on even after replacing the bulb.",
    },
    {
        "id": "M-1009",
        "title": "Dishwasher Not Draining",
        "property": "123 Main St, Apt 2A",
        "tenant": "Emily Wilson",
        "dateSubmitted": "2023-05-01",
        "status": "pending",
        "priority": "normal",
        "category": "appliance",
        "lastUpdated": "2023-05-01",
        "scheduledDate": None,
        "description": "The dishwasher isn't draining properly after cycles and leaves standing water.",
    },
    {
        "id": "M-1010",
        "title": "Heater not working",
        "property": "890 Elm St, Unit 5",
        "tenant": "David Martinez",
        "dateSubmitted": "2023-04-20",
        "status": "completed",
        "priority": "urgent",
        "category": "hvac",
        "lastUpdated": "2023-04-21",
        "scheduledDate": "2023-04-21",
        "description": "The heater stopped working completely yesterday.",
    },
]


def demo_requests() -> List[MaintenanceRequest]:
    """Fresh list of the demo maintenance requests."""
    return [MaintenanceRequest.model_validate(row) for row in _DEMO_ROWS]

