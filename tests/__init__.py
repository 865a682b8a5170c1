# Auto-generated __init__.py

from . import conftest
from .conftest import FakeClock
from .conftest import clock
from .conftest import cross_device
from .conftest import store
from .conftest import workdir
from . import test_cli
from .test_cli import settings
from .test_cli import store_dir
from .test_cli import test_cli_bad_settings_are_reported
from .test_cli import test_cli_bad_settings_passed_in
from .test_cli import test_cli_batch_continues_on_error
from .test_cli import test_cli_delete_latest
from .test_cli import test_cli_drop_list_recover
from .test_cli import test_cli_list_flags_unrecognized
from .test_cli import test_cli_recover_all_reports_each_outcome
from .test_cli import test_cli_recover_conflict_exit_code
from .test_cli import test_cli_usage_errors
from .test_cli import test_load_settings_defaults
from .test_cli import test_load_settings_merges_file_and_env
from .test_cli import test_settings_select_applies
from . import test_encoding
from .test_encoding import test_decode_rejects_foreign_names
from .test_encoding import test_disambiguator_in_name
from .test_encoding import test_encode_rejects_relative_path
from .test_encoding import test_encode_report_scenario
from .test_encoding import test_escape_character_is_not_ambiguous
from .test_encoding import test_roundtrip
from . import test_models
from .test_models import test_entry_directory_flag
from .test_models import test_entry_from_stored_path
from .test_models import test_entry_ordering_key
from . import test_store
from .test_store import test_ambiguous_identifier_is_reported
from .test_store import test_delete_all_continues_past_failing_entry
from .test_store import test_delete_ambiguous_without_policy
from .test_store import test_delete_directory_entry
from .test_store import test_delete_not_found
from .test_store import test_delete_removes_only_target
from .test_store import test_drop_directory_and_recover
from .test_store import test_drop_missing_file
from .test_store import test_drop_refuses_store_contents
from .test_store import test_drop_relative_path_is_made_absolute
from .test_store import test_drop_symlink_keeps_link
from .test_store import test_drop_then_recover_report
from .test_store import test_list_flags_unrecognized_entries
from .test_store import test_list_is_ordered_and_stable
from .test_store import test_list_missing_store
from .test_store import test_list_skips_partial_copies
from .test_store import test_match_by_stored_name_and_fragment
from .test_store import test_recover_all_continues_past_failing_entry
from .test_store import test_recover_all_skips_occupied_destination
from .test_store import test_recover_creates_missing_parent
from .test_store import test_recover_latest
from .test_store import test_recover_never_overwrites
from .test_store import test_recover_unknown_identifier
from .test_store import test_same_path_same_second_gets_disambiguator
from .test_store import test_single_entry_failure_keeps_its_kind
from .test_store import test_store_root_is_owner_only
from .test_store import test_store_root_not_a_directory
from .test_store import test_unknown_select_policy
from .test_store import test_unwritable_store_is_permission_denied
from .test_store import write_file
from . import test_transfer
from .test_transfer import make_tree
from .test_transfer import test_cross_device_bad_copy_keeps_source
from .test_transfer import test_cross_device_directory
from .test_transfer import test_cross_device_failed_source_removal_rolls_back
from .test_transfer import test_cross_device_file
from .test_transfer import test_cross_device_source_removed_after_commit
from .test_transfer import test_move_path_keeps_file_created_after_check
from .test_transfer import test_move_path_never_replaces
from .test_transfer import test_move_path_same_device
from .test_transfer import test_store_round_trip_across_devices

__all__ = [
    "conftest",
    "test_cli",
    "test_encoding",
    "test_models",
    "test_store",
    "test_transfer",
    "FakeClock",
    "clock",
    "cross_device",
    "make_tree",
    "settings",
    "store",
    "store_dir",
    "test_ambiguous_identifier_is_reported",
    "test_cli_bad_settings_are_reported",
    "test_cli_bad_settings_passed_in",
    "test_cli_batch_continues_on_error",
    "test_cli_delete_latest",
    "test_cli_drop_list_recover",
    "test_cli_list_flags_unrecognized",
    "test_cli_recover_all_reports_each_outcome",
    "test_cli_recover_conflict_exit_code",
    "test_cli_usage_errors",
    "test_cross_device_bad_copy_keeps_source",
    "test_cross_device_directory",
    "test_cross_device_failed_source_removal_rolls_back",
    "test_cross_device_file",
    "test_cross_device_source_removed_after_commit",
    "test_decode_rejects_foreign_names",
    "test_delete_all_continues_past_failing_entry",
    "test_delete_ambiguous_without_policy",
    "test_delete_directory_entry",
    "test_delete_not_found",
    "test_delete_removes_only_target",
    "test_disambiguator_in_name",
    "test_drop_directory_and_recover",
    "test_drop_missing_file",
    "test_drop_refuses_store_contents",
    "test_drop_relative_path_is_made_absolute",
    "test_drop_symlink_keeps_link",
    "test_drop_then_recover_report",
    "test_encode_rejects_relative_path",
    "test_encode_report_scenario",
    "test_entry_directory_flag",
    "test_entry_from_stored_path",
    "test_entry_ordering_key",
    "test_escape_character_is_not_ambiguous",
    "test_list_flags_unrecognized_entries",
    "test_list_is_ordered_and_stable",
    "test_list_missing_store",
    "test_list_skips_partial_copies",
    "test_load_settings_defaults",
    "test_load_settings_merges_file_and_env",
    "test_match_by_stored_name_and_fragment",
    "test_move_path_keeps_file_created_after_check",
    "test_move_path_never_replaces",
    "test_move_path_same_device",
    "test_recover_all_continues_past_failing_entry",
    "test_recover_all_skips_occupied_destination",
    "test_recover_creates_missing_parent",
    "test_recover_latest",
    "test_recover_never_overwrites",
    "test_recover_unknown_identifier",
    "test_roundtrip",
    "test_same_path_same_second_gets_disambiguator",
    "test_settings_select_applies",
    "test_single_entry_failure_keeps_its_kind",
    "test_store_root_is_owner_only",
    "test_store_root_not_a_directory",
    "test_store_round_trip_across_devices",
    "test_unknown_select_policy",
    "test_unwritable_store_is_permission_denied",
    "workdir",
    "write_file",
]
