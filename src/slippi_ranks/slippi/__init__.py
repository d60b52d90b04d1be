from slippi_ranks.slippi.client import SlippiClient, parse_rank_record, select_main_character

__all__ = ["SlippiClient", "parse_rank_record", "select_main_character"]
