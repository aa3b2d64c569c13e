import json
from pathlib import Path

from click.testing import CliRunner

from crd_to_types.crd_to_types import crdtotypes

TEST_DATA = Path(__file__).parent / "test_data"
INPUT = str(TEST_DATA / "provider.openapi.yaml")


class TestCli:
    """Test the crdtotypes command"""

    def test_missing_input(self):
        result = CliRunner().invoke(crdtotypes, [])
        assert result.exit_code != 0
        assert "--in" in result.output

    def test_nonexistent_input(self, tmp_path):
        result = CliRunner().invoke(crdtotypes, ["-i", str(tmp_path / "missing.yaml")])
        assert result.exit_code != 0

    def test_unparsable_input(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{broken")
        result = CliRunner().invoke(crdtotypes, ["-i", str(path)])
        assert result.exit_code == 1
        assert "Failed to parse" in result.output

    def test_no_output_by_default(self, tmp_path):
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT])
        assert result.exit_code == 0, result.output
        assert result.output == ""

    def test_json_dump(self):
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT, "--json"])
        assert result.exit_code == 0, result.output
        dump = json.loads(result.output)
        assert [item["type"]["name"] for item in dump][0] == "Provider"

    def test_write_output(self, tmp_path):
        out = tmp_path / "generated"
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT, "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "Generated 5 types" in result.output
        assert (out / "index.ts").exists()
        assert (out / "IoK8sApimachineryPkgApisMetaV1ObjectMeta.ts").exists()
        content = (out / "Provider.ts").read_text()
        assert " * Generated by crdtotypes v" in content
        assert "--in provider.openapi.yaml" in content

    def test_type_overrides(self, tmp_path):
        out = tmp_path / "generated"
        args = ["-i", INPUT, "-o", str(out), "--metadata-type", "ObjectMeta", "--fallback-type", "any"]
        result = CliRunner().invoke(crdtotypes, args)
        assert result.exit_code == 0, result.output
        assert (out / "ObjectMeta.ts").exists()
        assert "  metadata?: ObjectMeta;\n" in (out / "Provider.ts").read_text()
        assert "  settings?: any;\n" in (out / "ProviderSpec.ts").read_text()

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"fallback_type": "object", "add_generation_comment": False}))
        out = tmp_path / "generated"
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT, "-o", str(out), "-c", str(config)])
        assert result.exit_code == 0, result.output
        content = (out / "ProviderSpec.ts").read_text()
        assert "  settings?: object;\n" in content
        assert "Generated by" not in content

    def test_no_overwrite(self, tmp_path):
        out = tmp_path / "generated"
        out.mkdir()
        (out / "index.ts").write_text("keep")
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT, "-o", str(out), "--no-overwrite"])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert (out / "index.ts").read_text() == "keep"

    def test_strict_names(self, tmp_path):
        path = tmp_path / "api.json"
        path.write_text(
            json.dumps(
                {
                    "components": {
                        "schemas": {
                            "A": {"type": "object", "properties": {"bC": {"type": "object"}}},
                            "AB": {"type": "object", "properties": {"c": {"type": "object"}}},
                        }
                    }
                }
            )
        )
        assert CliRunner().invoke(crdtotypes, ["-i", str(path)]).exit_code == 0
        result = CliRunner().invoke(crdtotypes, ["-i", str(path), "--strict-names"])
        assert result.exit_code == 1
        assert "ABC" in result.output

    def test_unquoted_yaml_date_default(self, tmp_path):
        path = tmp_path / "api.yaml"
        path.write_text(
            "components:\n"
            "  schemas:\n"
            "    A:\n"
            "      type: object\n"
            "      properties:\n"
            "        since: {type: string, format: date, default: 2020-01-01}\n"
            "        mode: {type: string, enum: [on, off]}\n"
        )
        result = CliRunner().invoke(crdtotypes, ["-i", str(path), "--json"])
        assert result.exit_code == 0, result.output
        fields = json.loads(result.output)[0]["type"]["fields"]
        assert fields["since"]["default"] == "2020-01-01"
        assert fields["mode"]["type"] == "'on' | 'off'"

        out = tmp_path / "generated"
        result = CliRunner().invoke(crdtotypes, ["-i", str(path), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert '   * @default {"2020-01-01"}\n' in (out / "A.ts").read_text()

    def test_invalid_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text("{broken")
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT, "-c", str(config)])
        assert result.exit_code == 1
        assert "Failed to read config file" in result.output

        config.write_text("[]")
        result = CliRunner().invoke(crdtotypes, ["-i", INPUT, "-c", str(config)])
        assert result.exit_code == 1
        assert "must contain a JSON object" in result.output

    def test_camel_case_type_options(self, tmp_path):
        out = tmp_path / "generated"
        args = ["-i", INPUT, "-o", str(out), "--metadataType", "ObjectMeta", "--fallbackType", "any"]
        result = CliRunner().invoke(crdtotypes, args)
        assert result.exit_code == 0, result.output
        assert "  metadata?: ObjectMeta;\n" in (out / "Provider.ts").read_text()
        assert "  settings?: any;\n" in (out / "ProviderSpec.ts").read_text()
