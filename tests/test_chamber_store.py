"""Testes do ChamberStore."""

import json

from database import ChamberStore, ChamberOption, CHAMBERS_STORAGE_KEY


async def test_first_list_seeds_example_chamber(chamber_store):
    chambers = await chamber_store.list_chambers()

    assert len(chambers) == 1
    chamber = chambers[0]
    assert chamber.id == "1"
    assert chamber.name == "Câmara Municipal de Exemplo"
    assert [member.name for member in chamber.members] == ["João da Silva", "Maria Oliveira"]
    assert chamber.president.name == "João da Silva"


async def test_list_options_returns_id_name_pairs(chamber_store):
    assert await chamber_store.list_options() == [ChamberOption(id="1", name="Câmara Municipal de Exemplo")]


async def test_get_chamber_by_id(chamber_store):
    assert (await chamber_store.get_chamber_by_id("1")).city == "Cidade Exemplo"
    assert await chamber_store.get_chamber_by_id("2") is None


async def test_reads_chambers_written_by_others(storage):
    await storage.set_item(CHAMBERS_STORAGE_KEY, json.dumps([
        {"id": "7", "nome": "Câmara de Teste", "dataCriacao": "2024-05-01T10:00:00.000Z", "vereadores": []},
    ]))

    options = await ChamberStore(storage).list_options()

    assert options == [ChamberOption(id="7", name="Câmara de Teste")]


async def test_unparsable_chambers_return_empty_list(storage):
    await storage.set_item(CHAMBERS_STORAGE_KEY, "not json")

    assert await ChamberStore(storage).list_chambers() == []


async def test_seed_is_persisted_with_storage_field_names(chamber_store, storage):
    await chamber_store.list_chambers()

    record = json.loads(await storage.get_item(CHAMBERS_STORAGE_KEY))[0]
    assert record["nome"] == "Câmara Municipal de Exemplo"
    assert record["dataCriacao"] == "2023-01-01T00:00:00.000Z"
    assert record["vereadores"][0]["isPresidente"] is True


async def test_unreadable_chamber_is_skipped(storage):
    await storage.set_item(CHAMBERS_STORAGE_KEY, json.dumps([
        {"id": "7", "nome": "Câmara de Teste", "dataCriacao": "2024-05-01T10:00:00.000Z", "vereadores": []},
        {"id": "8", "nome": "Data numérica", "dataCriacao": 1700000000000, "vereadores": []},
    ]))

    options = await ChamberStore(storage).list_options()

    assert options == [ChamberOption(id="7", name="Câmara de Teste")]
