from wordsmith.parsing.segmentation import (
    is_potential_block,
    segment_response,
    split_blocks,
    truncate_merged_block,
)

from helpers import SCENARIO_RESPONSE


def test_split_blocks_on_blank_line_runs():
    blocks = split_blocks("a\nb\n\n\n\nc\n  \n d \n\n")
    assert blocks == ["a\nb", "c", "d"]


def test_split_blocks_handles_windows_newlines():
    assert split_blocks("a\r\n\r\nb") == ["a", "b"]


def test_scenario_response_has_two_candidate_blocks():
    segmentation = segment_response(SCENARIO_RESPONSE)
    assert len(segmentation.raw_blocks) == 2
    assert len(segmentation.blocks) == 2
    assert segmentation.blocks[1].startswith("joyful | adjective")


def test_noise_blocks_are_filtered_out():
    response = "Sure! Here are your definitions.\n\nhappy | adjective\nDefinition: glad.\n\nHope this helps!"
    segmentation = segment_response(response)
    assert len(segmentation.raw_blocks) == 3
    assert segmentation.blocks == ["happy | adjective\nDefinition: glad."]
    assert segmentation.sources == [1]


def test_potential_block_markers():
    assert is_potential_block("happy | adjective")
    assert is_potential_block("UK /ˈhæpi/")
    assert is_potential_block("Definition: glad")
    assert not is_potential_block("Here are the words you asked for")


def test_merged_block_is_cut_at_second_header():
    block = (
        "happy | adjective\n"
        "Definition: feeling pleasure.\n"
        "- I am happy.\n"
        "joyful | adjective\n"
        "Definition: full of joy."
    )
    assert truncate_merged_block(block) == (
        "happy | adjective\nDefinition: feeling pleasure.\n- I am happy."
    )


def test_single_header_block_is_left_alone():
    block = "happy | adjective\nDefinition: feeling pleasure."
    assert truncate_merged_block(block) == block


def test_empty_response_segments_to_nothing():
    segmentation = segment_response("")
    assert segmentation.raw_blocks == []
    assert segmentation.blocks == []
