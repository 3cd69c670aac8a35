import string

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from aac_board.core.board import BoardState
from aac_board.core.exceptions import (
    BoardFormatError,
    BoardIntegrityError,
    BoardPersistenceError,
    KeyNotFoundError,
)
from aac_board.core.models import Category
from aac_board.core.services.persistence_service import (
    load_board,
    parse_board,
    serialize_board,
    write_board,
)


EXPECTED_FOOD_BOARD = (
    "default default\n"
    ">img/hello.png hello\n"
    ">img/food/plate.png food\n"
    "img/food/plate.png food\n"
    ">img/food/icons8-french-fries-96.png french fries\n"
    ">img/food/icons8-watermelon-96.png watermelon\n"
)


@pytest.fixture
def broken_text_lookup(monkeypatch):
    """Make every category forget the text of its own images."""
    def broken_get_text(self, image_id):
        raise KeyNotFoundError(image_id)

    monkeypatch.setattr(Category, "get_text", broken_get_text)


class TestSerialize:
    def test_single_item(self, board):
        board.add_item("a.png", "A")
        assert serialize_board(board) == "default default\n>a.png A\n"

    def test_empty_board(self, board):
        assert serialize_board(board) == "default default\n"

    def test_category_and_item_order(self, food_board):
        assert serialize_board(food_board) == EXPECTED_FOOD_BOARD

    def test_empty_category_emits_header_only(self, board):
        board.add_category("clothing.png", "clothing")
        assert serialize_board(board) == "default default\nclothing.png clothing\n"

    def test_missing_text_is_integrity_error(self, board, broken_text_lookup):
        board.add_item("a.png", "A")
        with pytest.raises(BoardIntegrityError) as info:
            serialize_board(board)
        assert info.value.category_key == "default"
        assert info.value.image_id == "a.png"
        assert isinstance(info.value.cause, KeyNotFoundError)


class TestWrite:
    def test_write_creates_file(self, food_board, tmp_path):
        path = tmp_path / "AACMappings.txt"
        write_board(food_board, path)
        assert path.read_text(encoding="utf-8") == EXPECTED_FOOD_BOARD

    def test_write_overwrites_existing_file(self, board, tmp_path):
        path = tmp_path / "board.txt"
        path.write_text("stale content\n", encoding="utf-8")
        board.add_item("a.png", "A")
        board.write_to_file(path)
        assert path.read_text(encoding="utf-8") == "default default\n>a.png A\n"

    def test_integrity_failure_leaves_no_file(self, board, tmp_path, broken_text_lookup):
        board.add_item("a.png", "A")
        path = tmp_path / "board.txt"
        with pytest.raises(BoardIntegrityError):
            write_board(board, path)
        assert not path.exists()

    def test_unwritable_destination_raises(self, board, tmp_path):
        path = tmp_path / "missing_dir" / "board.txt"
        with pytest.raises(BoardPersistenceError) as info:
            write_board(board, path)
        assert info.value.path == str(path)
        assert isinstance(info.value.cause, OSError)


class TestParse:
    def test_parse_food_board(self):
        board = parse_board(EXPECTED_FOOD_BOARD)
        assert board.category_keys() == ["default", "img/food/plate.png"]
        assert board.current_images() == ["img/hello.png", "img/food/plate.png"]
        food = board.get_category("img/food/plate.png")
        assert food.name == "food"
        assert food.get_text("img/food/icons8-french-fries-96.png") == "french fries"

    def test_parsed_board_navigates(self):
        board = parse_board(EXPECTED_FOOD_BOARD)
        board.select("img/food/plate.png")
        assert board.current_category_name() == "food"

    def test_text_keeps_inner_spaces(self):
        board = parse_board("default default\n>a.png I would like a drink\n")
        assert board.current.get_text("a.png") == "I would like a drink"

    def test_item_without_text(self):
        board = parse_board("default default\n>a.png\n")
        assert board.current.get_text("a.png") == ""

    def test_header_without_name_uses_key(self):
        board = parse_board("default default\nfood\n>f.png fries\n")
        assert board.get_category("food").name == "food"

    def test_blank_lines_ignored(self):
        board = parse_board("\ndefault default\n\n>a.png A\n\n")
        assert board.current_images() == ["a.png"]

    def test_default_header_may_come_later(self):
        board = parse_board("food food\n>f.png fries\ndefault default\n>a.png A\n")
        assert board.category_keys() == ["default", "food"]
        assert board.current.get_text("a.png") == "A"

    def test_item_before_header_is_format_error(self):
        with pytest.raises(BoardFormatError) as info:
            parse_board("\n>a.png A\n")
        assert info.value.line_number == 2
        assert "line 2" in str(info.value)

    def test_load_missing_file_raises(self, tmp_path):
        with pytest.raises(BoardPersistenceError):
            load_board(tmp_path / "absent.txt")

    def test_load_reads_file(self, tmp_path):
        path = tmp_path / "board.txt"
        path.write_text(EXPECTED_FOOD_BOARD, encoding="utf-8")
        board = BoardState.load(path)
        assert serialize_board(board) == EXPECTED_FOOD_BOARD

    def test_other_line_breaks_stay_inside_text(self):
        text = "default default\n>a.png x\x1cy\u2028z\x0bw\x85v\n"
        board = parse_board(text)
        assert board.category_keys() == ["default"]
        assert board.current.get_text("a.png") == "x\x1cy\u2028z\x0bw\x85v"
        assert serialize_board(board) == text

    def test_file_round_trip_keeps_carriage_return_and_separators(self, board, tmp_path):
        board.add_item("a.png", "x\x1cy")
        board.add_item("b.png", "line\rend")
        path = tmp_path / "board.txt"
        write_board(board, path)
        restored = load_board(path)
        assert restored.category_keys() == ["default"]
        assert restored.current.get_text("a.png") == "x\x1cy"
        assert restored.current.get_text("b.png") == "line\rend"

    def test_key_starting_with_item_prefix_does_not_reload_as_category(self, board):
        board.add_category(">odd", "odd")
        restored = parse_board(serialize_board(board))
        assert restored.category_keys() == ["default"]
        assert restored.current.get_text("odd") == "odd"

    def test_key_with_space_does_not_reload_as_same_key(self, board):
        board.add_category("my food", "food")
        restored = parse_board(serialize_board(board))
        assert restored.category_keys() == ["default", "my"]
        assert restored.get_category("my").name == "food food"


tokens = st.text(alphabet=string.ascii_letters + string.digits + "./_-", min_size=1, max_size=12)
texts = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r"),
    max_size=20,
)
category_specs = st.lists(
    st.tuples(tokens, texts, st.lists(st.tuples(tokens, texts), max_size=6)),
    max_size=5,
)


@settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(st.lists(st.tuples(tokens, texts), max_size=6), category_specs)
def test_serialize_parse_round_trip(default_items, categories):
    """Parsing serialized text and serializing again gives the same text."""
    board = BoardState()
    for image_id, text in default_items:
        board.add_item(image_id, text)
    for key, name, items in categories:
        category = board.add_category(key, name)
        for image_id, text in items:
            category.add_item(image_id, text)

    text = serialize_board(board)
    restored = parse_board(text)

    assert serialize_board(restored) == text
    assert restored.category_keys() == board.category_keys()
    for key in board.category_keys():
        original = board.get_category(key)
        copy = restored.get_category(key)
        assert copy.get_images() == original.get_images()
        for image_id in original.get_images():
            assert copy.get_text(image_id) == original.get_text(image_id)
