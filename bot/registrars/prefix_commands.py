def register_prefix_commands(bot, deps):
    """Register text commands (`!set_windows ...` or `@bot set_windows ...`)."""
    scheduler = deps["scheduler"]
    dispatcher = deps["dispatcher"]
    TARGET_CHANNEL_ID = deps["TARGET_CHANNEL_ID"]
    COMMAND_PREFIX = deps["COMMAND_PREFIX"]

    apply_set_windows = deps["apply_set_windows"]
    mirror_confirmation = deps["mirror_confirmation"]
    describe_windows = deps["describe_windows"]
    clear_reminders = deps["clear_reminders"]
    build_help_embed = deps["build_help_embed"]

    @bot.command(name="help")
    async def help_command(ctx):
        """Show the command guide."""
        await ctx.send(embed=build_help_embed(COMMAND_PREFIX))

    @bot.command()
    async def ping(ctx):
        """Return current bot latency."""
        await ctx.send(f"🏓 Pong! {round(bot.latency * 1000)}ms")

    @bot.command()
    async def set_windows(ctx, *args):
        """Set one or two daily PR windows: `set_windows 10:00-11:00 [18:00-19:00]`."""
        chat_id = ctx.channel.id
        result = apply_set_windows(scheduler, chat_id, list(args))
        if not result["ok"]:
            await ctx.send(result["error"])
            return

        await ctx.send(result["reply"])
        await mirror_confirmation(dispatcher, chat_id, TARGET_CHANNEL_ID, result["reply"])

    @bot.command()
    async def show_windows(ctx):
        """List the windows configured for this channel."""
        await ctx.send(describe_windows(scheduler, ctx.channel.id))

    @bot.command(name="clear_reminders")
    async def clear_reminders_command(ctx):
        """Stop reminders in this channel; windows stay stored."""
        await ctx.send(clear_reminders(scheduler, ctx.channel.id))
