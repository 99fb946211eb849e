import pytest

from slug_processor.detector.dockerfile import extract_exposed_port, parse_dockerfile_port

NODE_DOCKERFILE = """\
FROM node:18
WORKDIR /app
COPY . .
RUN npm install
EXPOSE 3000
CMD ["npm", "start"]
"""


class TestExtractExposedPort:
    def test_first_expose_wins(self):
        assert extract_exposed_port("EXPOSE 8080\nEXPOSE 9090\n") == 8080

    def test_case_insensitive(self):
        assert extract_exposed_port("expose 5000") == 5000

    def test_expose_with_protocol_suffix(self):
        assert extract_exposed_port("EXPOSE 53/udp") == 53

    def test_port_past_int_conversion_limit(self):
        assert extract_exposed_port("EXPOSE " + "9" * 5000) is None

    @pytest.mark.parametrize("content", ["FROM python:3.11", "EXPOSE $PORT", ""])
    def test_no_numeric_expose(self, content):
        assert extract_exposed_port(content) is None


def test_parse_dockerfile_port(tmp_path):
    (tmp_path / "Dockerfile").write_text(NODE_DOCKERFILE, encoding="utf-8")
    assert parse_dockerfile_port(tmp_path) == 3000
