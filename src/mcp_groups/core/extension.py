"""Groups extension identifiers used for capability negotiation."""

EXTENSION_ID = "org.openmcptools/groups"
SERVER_CAPABILITIES_ID = f"{EXTENSION_ID}/server"
CLIENT_CAPABILITIES_ID = f"{EXTENSION_ID}/client"
