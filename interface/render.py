"""Plain-text rendering of calculator results.

Every function only prints; no calculation happens here.

Exports
-------
display_errors
display_analysis
display_advice
display_adjustment
display_baking
display_cake_chemistry
display_tempering
display_tempering_limits
display_layer_plan
display_scaled_recipe
display_filling_requirement
display_filling_chemistry
display_filling_scale
display_compatibility
display_preset_comparison
display_preset_list
display_preset
display_preparation_protocol
display_saved_recipes
display_comparisons
"""

from collections.abc import (
    Mapping,
)

_STATUS_LABELS = {
    "optimal": "✓ مثالي",
    "low": "↓ منخفض",
    "high": "↑ مرتفع",
}

_SAFETY_LABELS = {
    "safe": "SAFE",
    "warning": "WARNING",
    "danger": "DANGER",
}


def _header(title: str) -> None:
    print(f"========== {title} ==========")


def _footer() -> None:
    print("=" * 32)


def _print_recipe(
    recipe,
    unit: str = "g",
) -> None:
    if not recipe:
        print("  (empty)")
        return
    name_width = max(len(name) for name in recipe)
    for name, amount in recipe.items():
        print(f"  {name:<{name_width}}  {amount:>8.1f} {unit}")


def display_errors(
    errors,
) -> None:
    for message in errors:
        print(f"Error: {message}")


def display_analysis(
    analysis,
    texture=None,
) -> None:
    """Print percentages, range checks, score, hydration and texture."""
    _header("RECIPE ANALYSIS")
    print(f"Total weight: {analysis.total_weight:.1f} g")
    for component, percentage in analysis.percentages.items():
        status = analysis.checks.get(component)
        label = _STATUS_LABELS.get(status, "")
        print(f"  {component:<7} {percentage:>6.2f}%  {label}")
    print(f"Quality score: {analysis.quality_score}/100")
    print(f"Hydration: {analysis.hydration:.2f}% ({analysis.liquid_weight:.1f} g liquid)")
    if texture is not None:
        print()
        print(f"Texture: {texture.texture} [{texture.band}]")
        print(f"  {texture.visual_indicator} | {texture.troubleshooting}")
        for sense, note in texture.sensory.items():
            print(f"  {sense:<10} {note}")
        print("  Techniques:")
        for step, tip in texture.techniques.items():
            print(f"    {step}: {tip}")
    _footer()


def display_advice(
    cards,
) -> None:
    if not cards:
        print("All components are in range. Nothing to fix.")
        return
    _header("ADVISOR")
    for card in cards:
        print(f"[{card.component_name}] {card.current_value} (ideal {card.ideal_range})")
        print(f"  Impact:   {card.impact}")
        print(f"  Solution: {card.solution}")
        print(f"  Science:  {card.science}")
    _footer()


def display_adjustment(
    adjustments,
) -> None:
    if not adjustments:
        print("No adjustment needed.")
        return
    print("Suggested adjustment:")
    for component, delta in adjustments.items():
        print(f"  {component:<7} {delta:+d} g")


def display_baking(
    result,
    schedule=None,
) -> None:
    """Print a baking prediction and an optional time window."""
    _header("BAKING")
    print(f"Color:    {result.color} (browning index {result.browning_index})")
    print(f"Texture:  {result.texture} (score {result.texture_score})")
    print(f"Moisture loss: {result.moisture_loss}%")
    params = result.parameters
    print(
        f"Thickness {params['thickness_mm']:g} mm | honey share "
        f"{params['honey_share_pct']}% | butter protection "
        f"{params['butter_protection_pct']}%"
    )
    sensory = result.sensory_predictions
    print(f"Top: {sensory['visual']['top']}, edges: {sensory['visual']['edges']}")
    print(f"Aroma: {', '.join(sensory['aroma']['expected'])}")
    print(f"Bite: {sensory['texture']['bite']}")
    for advice in result.recommendations:
        print(f"  → {advice}")
    if schedule is not None:
        print()
        print(
            f"Schedule at {schedule.temp:g}°C: {schedule.recommended_time} min "
            f"({schedule.min_time}-{schedule.max_time})"
        )
        for cue in schedule.cues:
            print(f"  - {cue}")
    _footer()


def display_cake_chemistry(
    chemistry,
) -> None:
    _header("DOUGH CHEMISTRY")
    print(f"Brix:      {chemistry.brix.value}° {chemistry.brix.level} - {chemistry.brix.description}")
    print(f"pH:        {chemistry.ph.value} {chemistry.ph.level} - {chemistry.ph.description}")
    viscosity = chemistry.viscosity
    print(
        f"Viscosity: {viscosity.value} cP @ {viscosity.temperature:g}°C "
        f"{viscosity.level} - {viscosity.description}"
    )
    print(f"Rolling:   {chemistry.workability.message}")
    print(
        f"Sweetness: {chemistry.sweetness_index.percentage} "
        f"({chemistry.sweetness_index.level})"
    )
    effects = chemistry.baking_effects
    if effects is not None:
        print(f"After baking at {effects.temp:g}°C for {effects.time:g} min:")
        print(f"  Brix {effects.brix_before} → {effects.brix_after} ({effects.brix_change:+})")
        print(f"  pH   {effects.ph_before} → {effects.ph_after} ({effects.ph_change:+})")
        print(f"  aw {effects.water_activity}, moisture loss {effects.moisture_loss}%")
        print(f"  Maturation: {effects.maturation_time}")
    _footer()


def display_tempering(
    result,
) -> None:
    """Print one row per batch followed by the safety verdict."""
    _header("TEMPERING")
    print(f"Liquid Cp: {result.liquid_cp} kJ/kg·K")
    for batch in result.batches:
        print(
            f" {batch.batch_number}. {batch.percentage:>3}%  "
            f"{batch.temp_before:>5.1f} → {batch.temp_after:>5.1f}°C  "
            f"{batch.sensory_note}"
        )
        print(f"      {batch.technique}")
    print(f"Final: {result.final_temp}°C, peak {result.max_batch_temp}°C", end="")
    if result.critical_batch is not None:
        print(f" (batch {result.critical_batch})")
    else:
        print()
    status = _SAFETY_LABELS.get(result.safety_status, result.safety_status)
    print(f"[{status}] {result.recommendation}")
    _footer()


def display_tempering_limits(
    target_temp: float,
    max_hot_mass: float,
    max_hot_temp: float,
    extra_eggs: float,
) -> None:
    """Remedial options for keeping a blend at or below ``target_temp``."""
    print(f"To stay at or below {target_temp:g}°C:")
    if max_hot_mass != float("inf"):
        print(f"  - pour at most {max_hot_mass:.0f} g of hot liquid at once")
    if max_hot_temp != float("inf"):
        print(f"  - or cool the liquid to {max_hot_temp:.1f}°C")
    if extra_eggs > 0:
        print(f"  - or add {extra_eggs:.0f} g more eggs")


def display_layer_plan(
    plan,
) -> None:
    _header("LAYERS")
    print(f"Density: {plan.density:.3f} g/cm³")
    print(f"Per layer: {plan.single_layer_weight:.1f} g")
    print(f"Layers: {plan.num_layers}")
    print(f"Used: {plan.total_coverage:.1f} g, left over: {plan.remainder:.1f} g")
    _footer()


def display_scaled_recipe(
    scaled,
) -> None:
    _header("SCALED RECIPE")
    _print_recipe(scaled.new_recipe)
    print(f"Total: {scaled.total_weight:.1f} g, per layer {scaled.per_layer_weight:.1f} g")
    if scaled.scaling_factor is not None:
        print(f"Scaling factor: ×{scaled.scaling_factor:.3f}")
    _footer()


def display_filling_requirement(
    requirement,
) -> None:
    _header("FILLING NEEDED")
    print(
        f"{requirement.required_weight:.0f} g over {requirement.filling_layers} "
        f"layers ({requirement.per_layer_amount:.0f} g each)"
    )
    _print_recipe(requirement.scaled_recipe)
    _footer()


def display_filling_chemistry(
    chemistry,
) -> None:
    """Print Brix, pH, viscosity, water activity, stability and sweetness."""
    _header("FILLING CHEMISTRY")
    print(f"Brix:      {chemistry.brix.value}° {chemistry.brix.level} - {chemistry.brix.description}")
    ph = chemistry.ph
    print(f"pH:        {ph.value} {ph.level} - {ph.description} [{_SAFETY_LABELS.get(ph.safety, ph.safety)}]")
    viscosity = chemistry.viscosity
    print(f"Viscosity: {viscosity.value} cP {viscosity.level} - {viscosity.description}")
    aw = chemistry.water_activity
    print(f"aw:        {aw.value}")
    print(f"  Moisture transfer: {aw.moisture_transfer_rate}")
    print(f"  Maturation:        {aw.maturation_time}")
    print(f"  Stability:         {aw.stability}")
    print(f"  Safety:            {aw.microbial_safety}")
    stability = chemistry.stability
    print(f"Stability: {stability.score}/100 {stability.level}")
    if stability.recommendation:
        print(f"  {stability.recommendation}")
    for detail in stability.details:
        print(f"  {detail.ingredient}: {detail.contribution:+} ({detail.reason})")
    sweetness = chemistry.sweetness_index
    print(f"Sweetness: {sweetness.percentage} ({sweetness.level})")
    _footer()


def display_filling_scale(
    result,
) -> None:
    _header("SCALED FILLING")
    _print_recipe(result.recipe)
    print(
        f"Sweetness {result.original_sweetness.percentage} → "
        f"{result.new_sweetness.percentage} "
        f"(sugar reduced {result.reduction_applied:.1f}%)"
    )
    _footer()


def display_compatibility(
    report,
) -> None:
    _header("COMPATIBILITY")
    print(f"Score: {report.score}/100 {report.rating}")
    print(report.summary)
    for issue in report.issues:
        print(f"  ! {issue}")
    for recommendation in report.recommendations:
        print(f"  → {recommendation}")
    print(f"Maturation: {report.estimated_maturation}")
    _footer()


def display_preset_comparison(
    comparison,
) -> None:
    if not comparison:
        return
    print("Against preset targets:")
    for name, row in comparison.items():
        target = row["target"]
        if isinstance(target, Mapping):
            target_text = f"{target['min']:g}-{target['max']:g}"
        else:
            target_text = f"{target:g}"
        mark = "✓" if row["within"] else "✗"
        print(f"  {mark} {name:<13} {row['value']:>8g}  (target {target_text})")


def display_preset_list(
    presets,
) -> None:
    _header("FILLING PRESETS")
    key_width = max((len(preset.key) for preset in presets), default=0)
    for preset in presets:
        print(
            f"  {preset.key:<{key_width}}  {preset.name_en} "
            f"(difficulty {preset.difficulty_level}/10, {preset.yield_amount:g} g)"
        )
    _footer()


def display_preset(
    preset,
) -> None:
    """Print everything a preset carries."""
    _header(preset.name_en)
    print(preset.name)
    print(
        f"Difficulty {preset.difficulty_level}/10 | yield {preset.yield_amount:g} g | "
        f"layer {preset.default_thickness:g} mm | "
        f"{'needs cooking' if preset.needs_cooking else 'no cooking'}"
    )
    print("Ingredients:")
    _print_recipe(preset.base_recipe)
    print("Targets:")
    for name, value in preset.target_properties.items():
        if isinstance(value, Mapping):
            value = f"{value['min']:g}-{value['max']:g}"
        print(f"  {name}: {value}")
    print("Sensory:")
    for name, value in preset.sensory_targets.items():
        print(f"  {name}: {value}")
    print("Equipment:")
    for item in preset.required_equipment:
        print(f"  - {item}")
    print("Critical control points:")
    for point in preset.critical_control_points:
        print(f"  * {point.step}: {point.hazard}")
        print(f"    fix: {point.corrective_action}")
    print("If it goes wrong:")
    for failure in preset.failure_indicators.values():
        print(f"  * {failure.sign} ({failure.cause})")
        print(f"    rescue: {failure.rescue}")
    _footer()


def _print_protocol_action(
    action,
    indent: str,
) -> None:
    facts = [
        fact
        for fact in (
            action.time,
            action.duration,
            action.temperature,
            f"{action.rpm} rpm" if action.rpm is not None else "",
        )
        if fact
    ]
    suffix = f" [{' | '.join(facts)}]" if facts else ""
    print(f"{indent}- {action.action}{suffix}")
    for line in action.detail:
        print(f"{indent}    {line}")
    if action.checkpoint:
        print(f"{indent}    check: {action.checkpoint}")
    for warning in action.warnings:
        print(f"{indent}    ! {warning}")


def display_preparation_protocol(
    protocol,
) -> None:
    """Print a preset's preparation method step by step."""
    _header("PREPARATION")
    print(protocol.name)
    yield_text = f" | yield {protocol.yield_text}" if protocol.yield_text else ""
    print(f"Total time: {protocol.total_time} | difficulty: {protocol.difficulty}{yield_text}")
    before = protocol.pre_preparation
    if before is not None:
        critical = " (required)" if before.critical else ""
        print(f"Before you start{critical}: {before.title} [{before.duration}]")
        for action in before.tasks:
            _print_protocol_action(action, "  ")
    for step in protocol.steps:
        facts = " | ".join(fact for fact in (step.duration, step.temperature) if fact)
        print(f"Step {step.number}: {step.name}" + (f" [{facts}]" if facts else ""))
        if step.note:
            print(f"  note: {step.note}")
        for action in step.actions:
            _print_protocol_action(action, "  ")
    if protocol.troubleshooting:
        print("Troubleshooting:")
        for entry in protocol.troubleshooting:
            print(f"  * {entry.problem} ({', '.join(entry.causes)})")
            for solution in entry.solutions:
                print(f"    → {solution}")
    _footer()


def display_saved_recipes(
    records,
) -> None:
    if not records:
        print("No saved recipes.")
        return
    _header("SAVED RECIPES")
    for record in records:
        analysis = record.get("analysis") or {}
        score = analysis.get("qualityScore", "?")
        print(
            f"  {record.get('id')}  {record.get('name', '')}  "
            f"score {score}  ({record.get('createdAt', '')})"
        )
    _footer()


def display_comparisons(
    records,
) -> None:
    if not records:
        print("No saved comparisons.")
        return
    _header("SAVED COMPARISONS")
    for record in records:
        compatibility = record.get("compatibility") or {}
        line = f"  {record.get('id')}  {record.get('date', '')}"
        if compatibility:
            line += f"  {compatibility.get('score')}/100 {compatibility.get('rating', '')}"
        print(line)
        if record.get("notes"):
            print(f"      {record['notes']}")
    _footer()
