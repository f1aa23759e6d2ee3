from hostkit import (
    AttachOptions,
    DetachOptions,
    HostSettings,
    LocalHost,
    Rotator,
    ScriptContext,
    Vector3,
)


def main() -> None:
    host = LocalHost()
    settings = HostSettings(role="server")

    with ScriptContext(host=host, settings=settings) as ctx:
        player = "player-1"
        pickaxe = ctx.create_object("pickaxe", Vector3(0, 0, 0), Rotator())
        ctx.attach_entity_to_character(
            pickaxe,
            player,
            offset=(0.0, 2.0, 0.0),
            rotation=(0.0, 0.0, 90.0),
            options=AttachOptions(scale=Vector3(0.8, 0.8, 0.8)),
        )

        swings = 0

        def swing() -> None:
            nonlocal swings
            swings += 1
            ctx.printf("{player} swings the pickaxe ({n})", {"player": player, "n": swings})

        ctx.create_interval(swing, 500)
        ctx.on_shutdown(lambda: ctx.print("saving", swings, "swings"))

        host.advance(2000)
        ctx.detach_entity(pickaxe, DetachOptions(physics=True))
        ctx.print("pickaxe dropped at", host.objects[pickaxe].position)

    print(f"Objects left after shutdown: {len(host.objects)}")


if __name__ == "__main__":
    main()
