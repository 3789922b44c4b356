import copy

import pytest


SAMPLE_PROJECT = {
    "objName": "Stage",
    "sounds": [
        {"soundName": "pop", "md5": "83a9787d4cb6f3b7632b4ddfebf74367.wav"},
    ],
    "costumes": [
        {"costumeName": "backdrop1", "baseLayerMD5": "739b5e2a2435f6e1ec2993791b423146.png"},
    ],
    "variables": [
        {"name": "score", "value": 0, "isPersistent": False},
    ],
    "scripts": [
        [10, 10, [["whenGreenFlag"], ["broadcast:", "start"]]],
    ],
    "children": [
        {
            "objName": "Cat",
            "spriteInfo": {},
            "scripts": [
                [20, 20, [
                    ["whenIReceive", "start"],
                    ["doForever", [["forward:", 10], ["turnRight:", 15]]],
                ]],
                [40, 200, [
                    ["procDef", "jump %n", ["height"], [1], False],
                    ["changeYposBy:", ["getParam", "height", "r"]],
                ]],
            ],
            "scriptComments": [[10, 10, 120, 40, True, -1, "main loop"]],
            "sounds": [{"soundName": "meow", "md5": "83c36d806dc92327b9e7049a565c6bff.wav"}],
            "costumes": [
                {"costumeName": "costume1", "baseLayerMD5": "f9a1c175dbe2e5dee472858dd30d16bb.svg"},
                {"costumeName": "costume2", "baseLayerMD5": "6e8bd9ae68fdb02b7e1e3df656a75635.svg"},
            ],
            "lists": [{"listName": "inventory", "contents": []}],
        },
        {
            "objName": "Dog",
            "spriteInfo": None,
            "scripts": [[0, 0, [["whenGreenFlag"], ["forward:", 5]]]],
        },
        {
            "target": "Cat",
            "cmd": "getVar:",
            "param": "score",
            "visible": True,
        },
    ],
    "info": {
        "savedExtensions": [
            {"extensionName": "PicoBoard", "blockSpecs": []},
            {"extensionName": "LEGO WeDo"},
        ],
    },
}


@pytest.fixture
def sample_project():
    """A small decoded Scratch 2 project with a stage, two sprites and a watcher."""
    return copy.deepcopy(SAMPLE_PROJECT)
