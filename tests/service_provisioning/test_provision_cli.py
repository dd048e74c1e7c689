import json

from src.functions.service_provisioning.core.factory import ProvisioningFactory
from src.functions.service_provisioning.scripts import provision_cli


def test_describe_definition_masks_secrets(valid_payload):
    request = ProvisioningFactory.create_request(valid_payload)

    definition = provision_cli.describe_definition(request, "demo-project")

    assert definition["parent"] == "projects/demo-project/locations/us-central1"
    assert definition["serviceId"] == "demo-svc"
    values = {item["name"]: item["value"] for item in definition["env"]}
    assert values["ENABLE_MCP"] == "true"
    assert values["HUMANITEC_TOKEN"] == provision_cli.MASK
    assert values["GOOGLE_API_KEY"] == provision_cli.MASK
    assert values["GCP_SERVICE_ACCOUNT_KEY_JSON"] == provision_cli.MASK


def test_dry_run_prints_definition(monkeypatch, capsys):
    monkeypatch.setattr(provision_cli, "load_env", lambda: None)
    monkeypatch.setattr(provision_cli, "DefaultProjectResolver", lambda: (lambda: "demo-project"))

    exit_code = provision_cli.main(
        ["--service-name", "demo-svc", "--humanitec-token", "t", "--google-api-key", "k", "--dry-run"]
    )

    assert exit_code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["image"].startswith("us-central1-docker.pkg.dev/demo-project/")


def test_missing_token_exits_with_validation_message(monkeypatch, capsys):
    monkeypatch.setattr(provision_cli, "load_env", lambda: None)
    monkeypatch.delenv("HUMANITEC_TOKEN", raising=False)

    exit_code = provision_cli.main(["--service-name", "demo-svc", "--google-api-key", "k"])

    assert exit_code == 2
    assert 'Missing or invalid "HUMANITEC_TOKEN"' in capsys.readouterr().err
