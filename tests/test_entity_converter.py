import pytest
from langchain_core.exceptions import OutputParserException

from chat_playground.models import AiResponse
from chat_playground.services import EntityConverter


def test_format_instructions_embed_schema_by_alias():
    instructions = EntityConverter(AiResponse).get_format_instructions()

    assert "RFC8259" in instructions
    assert '"createdAt"' in instructions
    assert "created_at" not in instructions


def test_convert_plain_and_fenced_json():
    converter = EntityConverter(AiResponse)

    plain = converter.convert('{"title": "A", "data": "B", "createdAt": "C"}')
    fenced = converter.convert('```json\n{"title": "A", "data": "B", "createdAt": "C"}\n```')

    assert plain == fenced == AiResponse(title="A", data="B", created_at="C")


def test_convert_list_target():
    converter = EntityConverter(list[AiResponse])

    items = converter.convert('[{"title": "A"}, {"data": "B"}]')

    assert items == [AiResponse(title="A"), AiResponse(data="B")]


@pytest.mark.parametrize(
    "target, text",
    [
        (AiResponse, "There is no JSON here."),
        (AiResponse, '["a list", "not an object"]'),
        (list[AiResponse], '{"title": "object, not a list"}'),
    ],
)
def test_convert_rejects_unmappable_replies(target, text):
    with pytest.raises(OutputParserException):
        EntityConverter(target).convert(text)
