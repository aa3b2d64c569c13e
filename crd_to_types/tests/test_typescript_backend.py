import datetime
from pathlib import Path

import pytest

from crd_to_types.pipeline import CodeGeneratorConfig, PipelineGenerator, load_document

TEST_DATA = Path(__file__).parent / "test_data"
METADATA_TYPE = "IoK8sApimachineryPkgApisMetaV1ObjectMeta"


@pytest.fixture(scope="module")
def files():
    document = load_document(TEST_DATA / "provider.openapi.yaml")
    config = CodeGeneratorConfig(add_generation_comment=False)
    return PipelineGenerator(document, config).render()


class TestTypeScriptBackend:
    """Test rendering of the provider CRD document"""

    def test_file_set(self, files):
        assert list(files) == [
            "Provider.ts",
            "ProviderSpec.ts",
            "ProviderSpecSecret.ts",
            "ProviderStatus.ts",
            "ProviderStatusConditions.ts",
            f"{METADATA_TYPE}.ts",
            "index.ts",
        ]

    def test_header(self, files):
        header = files["ProviderSpec.ts"].split("*/", 1)[0]
        assert " * Forklift API\n" in header
        assert " * Virtual machine migration resources\n" in header
        assert " * The version of the OpenAPI document: v1beta1\n" in header
        assert " * Contact Email: forklift@example.com\n" in header
        assert " * License: Apache-2.0\n" in header
        assert "auto generated by crdtotypes" in header
        assert "Generated by" not in header

    def test_root_interface(self, files):
        content = files["Provider.ts"]
        assert (
            f"import {{ {METADATA_TYPE} }} from './{METADATA_TYPE}';\n"
            "import { ProviderSpec } from './ProviderSpec';\n"
            "import { ProviderStatus } from './ProviderStatus';\n\n"
        ) in content
        assert "/**\n * Provider is the Schema for the providers API\n *\n * @export\n */\nexport interface Provider {\n" in content
        assert "  apiVersion: string;\n" in content
        assert "  kind: string;\n" in content
        assert f"  metadata?: {METADATA_TYPE};\n" in content
        assert "   * @originalType {ProviderMetadata}\n" in content
        assert "  spec: ProviderSpec;\n" in content
        assert "  status?: ProviderStatus;\n" in content

    def test_field_doc_block(self, files):
        content = files["ProviderSpec.ts"]
        assert (
            "  /** url\n"
            "   *\n"
            "   * @required {false}\n"
            "   * @pattern {^https?://}\n"
            "   */\n"
            "  url?: string;\n"
        ) in content

    def test_enum_and_fallback(self, files):
        content = files["ProviderSpec.ts"]
        assert "  type: 'openshift' | 'vsphere' | 'ovirt';\n" in content
        assert "   * @originalType {string}\n" in content
        assert "  settings?: unknown | null;\n" in content
        assert "   * @originalType {not defined}\n" in content
        assert "import { ProviderSpecSecret } from './ProviderSpecSecret';\n" in content
        assert "ProviderSpecSettings" not in content

    def test_coercions_and_arrays(self, files):
        content = files["ProviderStatus.ts"]
        assert "  observedGeneration?: number;\n" in content
        assert "   * @format {int64}\n" in content
        assert "  lastSeen?: string;\n" in content
        assert "   * @format {date}\n" in content
        assert "  conditions?: ProviderStatusConditions[];\n" in content
        assert "  phases?: ('Ready' | 'Failed')[];\n" in content

    def test_default_tag(self, files):
        content = files["ProviderStatusConditions.ts"]
        assert "   * @default {false}\n" in content
        assert "  status: string;\n" in content
        assert "  durable?: boolean;\n" in content

    def test_no_imports_block(self, files):
        content = files["ProviderSpecSecret.ts"]
        assert "import " not in content
        assert " */\n\nexport interface ProviderSpecSecret {\n" in content

    def test_metadata_file(self, files):
        content = files[f"{METADATA_TYPE}.ts"]
        assert f"export interface {METADATA_TYPE} {{\n" in content
        assert "  name?: string;\n" in content
        assert "  labels?: { [key: string]: string };\n" in content

    def test_index(self, files):
        content = files["index.ts"]
        body = content.split("*/\n\n", 1)[1]
        assert body == f"export * from './Provider';\nexport * from './{METADATA_TYPE}';\n"

    def test_custom_metadata_type_file(self):
        document = load_document(TEST_DATA / "provider.openapi.yaml")
        config = CodeGeneratorConfig(metadata_type="ObjectMeta", add_generation_comment=False)
        files = PipelineGenerator(document, config).render()
        assert "ObjectMeta.ts" in files
        assert "export interface ObjectMeta {\n" in files["ObjectMeta.ts"]
        assert "export * from './ObjectMeta';\n" in files["index.ts"]

    def test_generation_comment(self):
        document = {"info": {"title": "T", "version": "1"}, "components": {"schemas": {"A": {"type": "object", "properties": {"x": {"type": "string"}}}}}}
        files = PipelineGenerator(document).render()
        assert " * Generated by crdtotypes v" in files["A.ts"]

    def test_quoted_property_names(self):
        document = {
            "info": {"title": "T", "version": "1"},
            "components": {"schemas": {"A": {"type": "object", "properties": {"x-custom": {"type": "string"}, "ok": {"type": "string"}}}}},
        }
        content = PipelineGenerator(document, CodeGeneratorConfig(add_generation_comment=False)).render()["A.ts"]
        assert "  'x-custom'?: string;\n" in content
        assert "  ok?: string;\n" in content

    def test_multiline_description(self):
        document = {
            "info": {"title": "T", "version": "1"},
            "components": {
                "schemas": {
                    "A": {"type": "object", "properties": {"x": {"type": "string", "description": "first line\n\nthird */ line"}}}
                }
            },
        }
        content = PipelineGenerator(document, CodeGeneratorConfig(add_generation_comment=False)).render()["A.ts"]
        assert "  /** x\n   * first line\n   *\n   * third *\\/ line\n   *\n   * @required {false}\n" in content

    def test_date_values(self):
        since = {"type": "string", "format": "date", "default": datetime.date(2020, 1, 1), "enum": [datetime.date(2020, 1, 1)]}
        document = {"info": {"title": "T", "version": "1"}, "components": {"schemas": {"A": {"type": "object", "properties": {"since": since}}}}}
        content = PipelineGenerator(document, CodeGeneratorConfig(add_generation_comment=False)).render()["A.ts"]
        assert '   * @default {"2020-01-01"}\n' in content
        assert "  since?: '2020-01-01';\n" in content
