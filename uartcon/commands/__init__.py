"""Help, heartbeat and network command groups for the command engine."""