"""The policy model, the coordinator interface and the version-zero coordinator."""