#!/usr/bin/env python

"""Built-in colours used when colour output is on."""

from .style import (
    Style, BLUE, CYAN, DARK_GRAY, GREEN, PURPLE, RED, WHITE, YELLOW,
)
from .ui_styles import (
    FileKinds, FileTypeStyles, Git, GitRepo, Links, Permissions,
    SecurityContext, SELinuxContext, Size, UiStyles, Users,
)


def default_theme(scale) -> UiStyles:
    """Build the default style table.

    *scale* is the colour-scale configuration; its ``size`` flag decides
    which size palette to use.
    """
    return UiStyles(
        colourful=True,

        filekinds=FileKinds(
            normal=Style(),
            directory=Style.of(BLUE).bold(),
            symlink=Style.of(CYAN),
            pipe=Style.of(YELLOW),
            block_device=Style.of(YELLOW).bold(),
            char_device=Style.of(YELLOW).bold(),
            socket=Style.of(RED).bold(),
            special=Style.of(YELLOW),
            executable=Style.of(GREEN).bold(),
            mount_point=Style.of(BLUE).bold().underline(),
        ),

        perms=Permissions(
            user_read=Style.of(YELLOW).bold(),
            user_write=Style.of(RED).bold(),
            user_execute_file=Style.of(GREEN).bold().underline(),
            user_execute_other=Style.of(GREEN).bold(),

            group_read=Style.of(YELLOW),
            group_write=Style.of(RED),
            group_execute=Style.of(GREEN),

            other_read=Style.of(YELLOW),
            other_write=Style.of(RED),
            other_execute=Style.of(GREEN),

            special_user_file=Style.of(PURPLE),
            special_other=Style.of(PURPLE),

            attribute=Style(),
        ),

        size=colourful_size(scale),

        users=Users(
            user_you=Style.of(YELLOW).bold(),
            user_root=Style(),
            user_other=Style(),
            group_yours=Style.of(YELLOW).bold(),
            group_other=Style(),
            group_root=Style(),
        ),

        links=Links(
            normal=Style.of(RED).bold(),
            multi_link_file=Style.of(RED).on(YELLOW),
        ),

        git=Git(
            new=Style.of(GREEN),
            modified=Style.of(BLUE),
            deleted=Style.of(RED),
            renamed=Style.of(YELLOW),
            typechange=Style.of(PURPLE),
            ignored=Style().dimmed(),
            conflicted=Style.of(RED),
        ),

        git_repo=GitRepo(
            branch_main=Style.of(GREEN),
            branch_other=Style.of(YELLOW),
            git_clean=Style.of(GREEN),
            git_dirty=Style.of(YELLOW).bold(),
        ),

        security_context=SecurityContext(
            none=Style(),
            selinux=SELinuxContext(
                colon=Style().dimmed(),
                user=Style.of(BLUE),
                role=Style.of(GREEN),
                typ=Style.of(YELLOW),
                range=Style.of(CYAN),
            ),
        ),

        file_type=FileTypeStyles(
            image=Style.of(PURPLE),
            video=Style.of(PURPLE).bold(),
            music=Style.of(CYAN),
            lossless=Style.of(CYAN).bold(),
            crypto=Style.of(GREEN).bold(),
            document=Style.of(GREEN),
            compressed=Style.of(RED),
            temp=Style.of(WHITE),
            compiled=Style.of(YELLOW),
            build=Style.of(YELLOW).bold().underline(),
            source=Style.of(YELLOW).bold(),
        ),

        punctuation=Style.of(DARK_GRAY).bold(),
        date=Style.of(BLUE),
        inode=Style.of(PURPLE),
        blocks=Style.of(CYAN),
        octal=Style.of(PURPLE),
        flags=Style(),
        header=Style().underline(),

        symlink_path=Style.of(CYAN),
        control_char=Style.of(RED),
        broken_symlink=Style.of(RED),
        broken_path_overlay=Style().underline(),
    )


def colourful_size(scale) -> Size:
    # With size scaling on, the renderer grades the colour itself, so every
    # magnitude starts from the same green.
    if scale.size:
        return colourful_fixed_size()
    return colourful_gradient_size()


def colourful_fixed_size() -> Size:
    return Size(
        major=Style.of(GREEN).bold(),
        minor=Style.of(GREEN),

        number_byte=Style.of(GREEN).bold(),
        number_kilo=Style.of(GREEN).bold(),
        number_mega=Style.of(GREEN).bold(),
        number_giga=Style.of(GREEN).bold(),
        number_huge=Style.of(GREEN).bold(),

        unit_byte=Style.of(GREEN),
        unit_kilo=Style.of(GREEN),
        unit_mega=Style.of(GREEN),
        unit_giga=Style.of(GREEN),
        unit_huge=Style.of(GREEN),
    )


def colourful_gradient_size() -> Size:
    return Size(
        major=Style.of(GREEN).bold(),
        minor=Style.of(GREEN),

        number_byte=Style.of(GREEN),
        number_kilo=Style.of(GREEN).bold(),
        number_mega=Style.of(YELLOW).bold(),
        number_giga=Style.of(RED).bold(),
        number_huge=Style.of(PURPLE).bold(),

        unit_byte=Style.of(GREEN),
        unit_kilo=Style.of(GREEN).bold(),
        unit_mega=Style.of(YELLOW).bold(),
        unit_giga=Style.of(RED).bold(),
        unit_huge=Style.of(PURPLE).bold(),
    )
