"""Tests for the encode_form_data tool and FormValues"""

import dataclasses

from form_encoder.encoder import Encoder
from form_encoder.models.config import Mode
from form_encoder.models.form_values import FormValues
from form_encoder.util.encode_form_data import encode
from form_encoder.util.fields import form_field


@dataclasses.dataclass
class Assignment:
    assignee_id: str = form_field("assigneeID")
    clearance_ids: list = dataclasses.field(default_factory=list)


class TestEncodeFormData:
    def test_encode_dict(self):
        """It should encode a dict as a sorted query string."""
        data = {"name": "Al", "tags": ["x", "y"]}

        assert encode(data) == "name=Al&tags%5B0%5D=x&tags%5B1%5D=y"

    def test_encode_struct(self):
        """It should encode a struct with its nested lists."""
        data = Assignment(assignee_id="200103374", clearance_ids=["g1", "g2"])

        assert encode(data) == (
            "assigneeID=200103374&clearance_ids%5B0%5D=g1&clearance_ids%5B1%5D=g2"
        )

    def test_custom_encoder(self):
        """It should use the encoder it is given."""
        encoder = Encoder()
        encoder.set_mode(Mode.EXPLICIT)

        assert encode(Assignment(assignee_id="1", clearance_ids=["g1"]), encoder) == "assigneeID=1"


class TestFormValues:
    def test_repeated_values(self):
        values = FormValues()
        values.add("a", "1")
        values.add("a", "2")
        values.add("b", "x y")

        assert values.encode() == "a=1&a=2&b=x+y"

    def test_get_first(self):
        values = FormValues({"a": ["1", "2"], "b": []})

        assert values.get_first("a") == "1"
        assert values.get_first("b") == ""
        assert values.get_first("c", "none") == "none"
