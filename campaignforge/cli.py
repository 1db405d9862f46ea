"""
Command-line interface for the campaignforge package.

This module provides the CLI commands for the campaignforge package:
- create: Generate a campaign (copy + SEO analysis) from a brief
- graphics: Generate graphics for a campaign
- video: Generate a video brief for a campaign
- list: Show the campaign dashboard
- show: Review a campaign
- edit-block: Edit the body of a content block
- export: Export a campaign to JSON
- brand: Show or change the brand settings
"""

import sys
import click
from typing import Optional, Tuple

from campaignforge import __version__
from campaignforge.core.config import get_storage_directory
from campaignforge.core.constants import CAMPAIGN_STATUSES, INDUSTRY_OPTIONS, PLATFORM_OPTIONS
from campaignforge.core.error_handler import ConfigurationError, ValidationError
from campaignforge.core.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

@click.group()
@click.version_option(version=__version__)
@click.option('--data-dir', type=click.Path(file_okay=False, dir_okay=True),
              help='Directory holding saved campaigns and brand settings (default: ~/.campaignforge/data)')
@click.option('-v', '--verbose', is_flag=True, default=False, help='Enable debug logging')
@click.pass_context
def main(ctx, data_dir: Optional[str] = None, verbose: bool = False):
    """
    campaignforge - AI marketing campaign generation.

    Describe a campaign brief and let the generation agents write platform
    copy, SEO analysis, graphics and video briefs.
    """
    configure_logging(level="DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = get_storage_directory(data_dir)

def _open_workspace(ctx):
    from campaignforge.storage.persistence import CampaignStore
    from campaignforge.storage.synchronizer import Workspace

    return Workspace(CampaignStore(ctx.obj["data_dir"]))

def _fail(message: str):
    logger.error(message)
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)

def _select(workspace, campaign_id: str):
    campaign = workspace.select(campaign_id)
    if campaign is None:
        _fail(f"No campaign with id {campaign_id}")
    return campaign

def _report(result):
    """Print a workflow status line and exit non-zero on failure."""
    if result.failed:
        click.echo(result.message, err=True)
        sys.exit(1)
    if result.message:
        click.echo(result.message)

def _make_orchestrator():
    from campaignforge.pipeline.orchestrator import GenerationOrchestrator

    try:
        return GenerationOrchestrator()
    except ConfigurationError as e:
        _fail(str(e))

@main.command()
@click.argument('brief_path', type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True), required=False)
@click.option('-o', '--objective', type=str, help='Campaign objective')
@click.option('-a', '--audience', type=str, help='Target audience')
@click.option('-i', '--industry', type=str,
              help=f'Industry, e.g. {", ".join(INDUSTRY_OPTIONS[:4])} (default: brand settings industry)')
@click.option('--brand-voice', type=str, help='Brand voice (default: brand settings voice tone)')
@click.option('-p', '--platform', 'platforms', multiple=True,
              help=f'Platform to write for; repeat for several ({", ".join(PLATFORM_OPTIONS)})')
@click.option('-k', '--keyword', 'keywords', multiple=True, help='SEO keyword; repeat for several')
@click.option('--competitor-urls', type=str, help='Competitor URLs to analyse')
@click.pass_context
def create(ctx, brief_path: Optional[str] = None, objective: Optional[str] = None,
           audience: Optional[str] = None, industry: Optional[str] = None,
           brand_voice: Optional[str] = None, platforms: Tuple[str, ...] = (),
           keywords: Tuple[str, ...] = (), competitor_urls: Optional[str] = None):
    """
    Generate a campaign from a brief.

    The brief is either a JSON file (BRIEF_PATH) with objective, audience,
    industry, brandVoice, platforms, keywords and competitorUrls, or given
    with options. Options override values from the file.

    Examples:
      campaignforge create brief.json
      campaignforge create -o "Launch X" -a "developers" -p Blog -p LinkedIn -k devtools
    """
    from campaignforge.campaign.input_validator import InputValidator
    from campaignforge.core.utils import load_json_file

    workspace = _open_workspace(ctx)
    validator = InputValidator()

    brief = {
        "industry": workspace.brand_settings.industry,
        "brandVoice": workspace.brand_settings.voice_tone,
    }
    try:
        if brief_path:
            file_brief = load_json_file(brief_path)
            if not isinstance(file_brief, dict):
                raise ValidationError("Campaign brief must be a JSON object")
            brief.update(file_brief)
    except ValueError as e:
        _fail(f"Invalid JSON in campaign brief: {e}")
    except ValidationError as e:
        _fail(e.message)

    overrides = {
        "objective": objective,
        "audience": audience,
        "industry": industry,
        "brandVoice": brand_voice,
        "platforms": list(dict.fromkeys(platforms)) or None,
        "keywords": list(dict.fromkeys(k.strip() for k in keywords if k.strip())) or None,
        "competitorUrls": competitor_urls,
    }
    brief.update({k: v for k, v in overrides.items() if v is not None})

    try:
        form = validator.validate_brief_data(brief)
    except ValidationError as e:
        _fail(e.message)

    orchestrator = _make_orchestrator()
    click.echo("Generating campaign...")
    result = orchestrator.generate_campaign(workspace, form)
    _report(result)

    campaign = result.campaign
    click.echo(f"Campaign '{campaign.name}' ({campaign.id}): {len(campaign.content_blocks)} content blocks")

@main.command()
@click.argument('campaign_id', type=str)
@click.option('--prompt', type=str, help='Describe the graphic you want')
@click.pass_context
def graphics(ctx, campaign_id: str, prompt: Optional[str] = None):
    """
    Generate graphics for a campaign and add them to it.
    """
    workspace = _open_workspace(ctx)
    _select(workspace, campaign_id)

    orchestrator = _make_orchestrator()
    click.echo("Generating graphics...")
    result = orchestrator.generate_graphics(workspace, prompt)
    _report(result)
    if result.campaign:
        click.echo(f"Campaign now has {len(result.campaign.graphics)} graphics")

@main.command()
@click.argument('campaign_id', type=str)
@click.option('--prompt', type=str, help='Describe the video concept')
@click.pass_context
def video(ctx, campaign_id: str, prompt: Optional[str] = None):
    """
    Generate a video brief for a campaign, replacing any previous brief.
    """
    workspace = _open_workspace(ctx)
    _select(workspace, campaign_id)

    orchestrator = _make_orchestrator()
    click.echo("Generating video brief...")
    result = orchestrator.generate_video_brief(workspace, prompt)
    _report(result)
    if result.campaign and result.campaign.video_brief:
        click.echo(f"Video brief: {result.campaign.video_brief.video_title}")

@main.command(name='list')
@click.option('-s', '--search', type=str, default='', help='Only campaigns whose name contains this text')
@click.option('--status', type=click.Choice(['all'] + CAMPAIGN_STATUSES), default='all', help='Only campaigns with this status')
@click.option('--sample', is_flag=True, default=False, help='Show sample campaigns instead of saved ones')
@click.pass_context
def list_campaigns(ctx, search: str = '', status: str = 'all', sample: bool = False):
    """
    Show the campaign dashboard.
    """
    from campaignforge.pipeline.dashboard import SAMPLE_CAMPAIGNS, filter_campaigns, summarize

    campaigns = SAMPLE_CAMPAIGNS if sample else _open_workspace(ctx).campaigns
    summary = summarize(campaigns)

    click.echo(f"Campaigns: {summary.total}  Active: {summary.active}  "
               f"Content pieces: {summary.total_content}  Avg SEO score: {summary.average_seo_score}")

    matches = filter_campaigns(campaigns, search, status)
    if not matches:
        click.echo("No campaigns found")
        return

    for campaign in matches:
        click.echo(f"{campaign.id}  {campaign.created_at}  [{campaign.status}]  {campaign.name}  "
                   f"({', '.join(campaign.platforms)})")

@main.command()
@click.argument('campaign_id', type=str)
@click.pass_context
def show(ctx, campaign_id: str):
    """
    Review a campaign: content blocks, SEO analysis, graphics and video brief.
    """
    campaign = _select(_open_workspace(ctx), campaign_id)
    click.echo(format_campaign(campaign))

@main.command(name='edit-block')
@click.argument('campaign_id', type=str)
@click.argument('index', type=int)
@click.argument('body', type=str)
@click.pass_context
def edit_block(ctx, campaign_id: str, index: int, body: str):
    """
    Replace the body of content block INDEX (starting at 0).
    """
    workspace = _open_workspace(ctx)
    campaign = _select(workspace, campaign_id)

    if not 0 <= index < len(campaign.content_blocks):
        _fail(f"Campaign has no content block {index}")

    updated = workspace.update_content_block(index, body)
    click.echo(f"Updated block {index}: {updated.content_blocks[index].word_count} words")

@main.command()
@click.argument('campaign_id', type=str)
@click.option('-o', '--output-dir', type=click.Path(file_okay=False, dir_okay=True), default='.',
              help='Directory for the exported file (default: current directory)')
@click.pass_context
def export(ctx, campaign_id: str, output_dir: str = '.'):
    """
    Export a campaign to a JSON file named after it.
    """
    from campaignforge.storage.export import export_campaign

    campaign = _select(_open_workspace(ctx), campaign_id)
    try:
        path = export_campaign(campaign, output_dir)
    except OSError as e:
        _fail(f"Could not export campaign: {e}")
    click.echo(f"Exported to {path}")

@main.group()
def brand():
    """
    Show or change the brand settings used in every prompt.
    """
    pass

@brand.command(name='show')
@click.pass_context
def brand_show(ctx):
    """
    Show the brand settings.
    """
    settings = _open_workspace(ctx).brand_settings
    click.echo(f"Brand name: {settings.brand_name}")
    click.echo(f"Tagline: {settings.tagline}")
    click.echo(f"Voice & tone: {settings.voice_tone}")
    click.echo(f"Industry: {settings.industry}")
    click.echo(f"Color notes: {settings.color_notes}")

@brand.command(name='set')
@click.option('--brand-name', type=str)
@click.option('--tagline', type=str)
@click.option('--voice-tone', type=str)
@click.option('--industry', type=str)
@click.option('--color-notes', type=str)
@click.pass_context
def brand_set(ctx, **values):
    """
    Change brand settings; options that are not given keep their value.
    """
    from dataclasses import replace

    workspace = _open_workspace(ctx)
    changes = {k: v for k, v in values.items() if v is not None}
    if not changes:
        _fail("Nothing to change, pass at least one option")

    workspace.save_brand_settings(replace(workspace.brand_settings, **changes))
    click.echo("Brand settings saved")

def format_campaign(campaign) -> str:
    """
    Format a campaign for review in the terminal.
    """
    lines = [
        f"{campaign.name}",
        f"  id: {campaign.id}  status: {campaign.status}  created: {campaign.created_at}",
        f"  objective: {campaign.objective}",
        f"  audience: {campaign.audience}",
        f"  industry: {campaign.industry}",
        f"  platforms: {', '.join(campaign.platforms)}",
        "",
        f"Content blocks ({len(campaign.content_blocks)}):",
    ]
    for index, block in enumerate(campaign.content_blocks):
        lines.append(f"  [{index}] {block.platform} - {block.title or block.content_type} ({block.word_count} words)")
        for body_line in block.body.splitlines():
            lines.append(f"      {body_line}")
        if block.hashtags:
            lines.append(f"      {block.hashtags}")

    seo = campaign.seo_analysis
    lines.append("")
    if seo is None:
        lines.append("SEO analysis: none")
    else:
        lines.append(f"SEO analysis: score {seo.content_score}")
        if seo.meta_title:
            lines.append(f"  meta title: {seo.meta_title}")
        if seo.meta_description:
            lines.append(f"  meta description: {seo.meta_description}")
        for keyword in seo.keywords:
            lines.append(f"  keyword: {keyword.keyword} (volume {keyword.search_volume}, difficulty {keyword.difficulty})")
        for tip in seo.optimization_tips:
            lines.append(f"  tip: {tip}")
        for gap in seo.competitor_gaps:
            lines.append(f"  gap: {gap.gap} -> {gap.opportunity}")

    lines.append("")
    lines.append(f"Graphics ({len(campaign.graphics)}):")
    for graphic in campaign.graphics:
        lines.append(f"  {graphic.file_url}  {graphic.platform} {graphic.dimensions}".rstrip())

    brief = campaign.video_brief
    lines.append("")
    if brief is None:
        lines.append("Video brief: none")
    else:
        lines.append(f"Video brief: {brief.video_title} ({brief.target_duration}, {brief.target_platform})")
        for scene in brief.scenes:
            lines.append(f"  scene {scene.scene_number}: {scene.description}")

    return "\n".join(lines)
