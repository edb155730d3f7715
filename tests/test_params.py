import json

import pytest

from wavepath import settings
from wavepath.params import InvalidWaveParams, WaveParams, load_params

HOST_RECORD = {
    "waveLength": 100,
    "waveHeight": 20,
    "waveRoundness": 50,
    "waveOffset": -10,
    "numWaves": 3,
}


def test_from_mapping_camel_case():
    params = WaveParams.from_mapping(HOST_RECORD)
    assert params == WaveParams(100.0, 20.0, 50.0, -10.0, 3)
    assert params.roundness == 0.5
    assert params.offset == -0.1
    assert params.width == 300.0
    assert params.height == 40.0
    assert params.clamp_handles is False


def test_from_mapping_snake_case_and_default_waves():
    params = WaveParams.from_mapping(
        {"wave_length": 80.0, "wave_height": 5.0, "wave_roundness": 0, "wave_offset": 0}
    )
    assert params.num_waves == settings.DEFAULT_NUM_WAVES
    assert params.wave_length == 80.0


def test_integral_float_wave_count_accepted():
    params = WaveParams.from_mapping({**HOST_RECORD, "numWaves": 2.0})
    assert params.num_waves == 2
    assert isinstance(params.num_waves, int)


def test_extreme_roundness_and_offset_accepted():
    params = WaveParams.from_mapping({**HOST_RECORD, "waveRoundness": 450, "waveOffset": -300})
    assert params.roundness == 4.5


@pytest.mark.parametrize(
    "override, field",
    [
        ({"waveLength": None}, "wave_length"),
        ({"waveLength": 0}, "wave_length"),
        ({"waveHeight": -1}, "wave_height"),
        ({"waveHeight": "20"}, "wave_height"),
        ({"waveRoundness": True}, "wave_roundness"),
        ({"waveOffset": float("nan")}, "wave_offset"),
        ({"waveLength": float("inf")}, "wave_length"),
        ({"numWaves": 2.5}, "num_waves"),
        ({"numWaves": 0}, "num_waves"),
        ({"numWaves": "four"}, "num_waves"),
        ({"clampHandles": "yes"}, "clamp_handles"),
        ({"numWaves": 10**400}, "num_waves"),
        ({"waveLength": -(10**400)}, "wave_length"),
    ],
)
def test_from_mapping_rejects(override, field):
    record = {**HOST_RECORD, **override}
    with pytest.raises(InvalidWaveParams) as excinfo:
        WaveParams.from_mapping(record)
    assert excinfo.value.field == field
    assert isinstance(excinfo.value, ValueError)


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(InvalidWaveParams):
        WaveParams.from_mapping([100, 20, 50, 0, 4])


def test_to_dict_round_trips():
    params = WaveParams(120.0, 15.0, 30.0, 5.0, 2, clamp_handles=True)
    assert WaveParams.from_mapping(params.to_dict()) == params


def test_load_params_accepts_record_and_message(tmp_path):
    record_path = tmp_path / "record.json"
    record_path.write_text(json.dumps(HOST_RECORD), encoding="utf-8")
    message_path = tmp_path / "message.json"
    message_path.write_text(
        json.dumps({"type": "generate-wave", "params": HOST_RECORD}), encoding="utf-8"
    )
    assert load_params(record_path) == load_params(message_path)


def test_load_params_rejects_other_messages(tmp_path):
    path = tmp_path / "cancel.json"
    path.write_text(json.dumps({"type": "cancel"}), encoding="utf-8")
    with pytest.raises(InvalidWaveParams):
        load_params(path)
